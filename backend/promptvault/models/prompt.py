"""Prompt model."""

import enum

from sqlalchemy import Column, Integer, String, BigInteger, Boolean, Float, Text, JSON

from promptvault.database import Base


class PromptCategory(str, enum.Enum):
    MARKETING = "Marketing"
    DEVELOPMENT = "Development"
    WRITING = "Writing"
    BUSINESS = "Business"
    EDUCATION = "Education"
    CREATIVE = "Creative"
    OTHER = "Other"


class Prompt(Base):
    __tablename__ = "prompts"
    # Ids are never reused, even after the highest one is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False)
    author = Column(String(128), nullable=False, index=True)
    category = Column(String(20), nullable=False)  # PromptCategory value
    tags = Column(JSON, nullable=False, default=list)
    price = Column(BigInteger, nullable=False, default=0)  # e8s
    is_premium = Column(Boolean, nullable=False, default=False)
    is_public = Column(Boolean, nullable=False, default=True)
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    # Derived counters, kept in step with the per-user indexes
    likes = Column(BigInteger, nullable=False, default=0)
    purchases = Column(BigInteger, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0.0)
    total_ratings = Column(BigInteger, nullable=False, default=0)
