"""Per-user relation indexes: purchased, liked and rated prompt ids.

Prompt ids here are weak references. Deleting a prompt leaves its id in
these tables.
"""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from promptvault.database import Base


class UserPurchase(Base):
    __tablename__ = "user_purchases"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", name="uq_user_purchase"),
        {"sqlite_autoincrement": True},
    )

    # Increasing id preserves the order the user bought prompts in
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)
    prompt_id = Column(Integer, nullable=False)


class UserLike(Base):
    __tablename__ = "user_likes"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", name="uq_user_like"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)
    prompt_id = Column(Integer, nullable=False)


class UserRating(Base):
    __tablename__ = "user_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "prompt_id", name="uq_user_rating"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)
    prompt_id = Column(Integer, nullable=False)
    value = Column(Integer, nullable=False)  # 1-5, last submitted
