"""User model."""

from sqlalchemy import Column, String, BigInteger

from promptvault.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(128), primary_key=True)  # caller principal
    username = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    joined_at = Column(BigInteger, nullable=False)  # ns since epoch

    # Ledgers, in the smallest currency unit
    total_earnings = Column(BigInteger, nullable=False, default=0)
    total_spent = Column(BigInteger, nullable=False, default=0)

    prompts_created = Column(BigInteger, nullable=False, default=0)
    prompts_purchased = Column(BigInteger, nullable=False, default=0)
