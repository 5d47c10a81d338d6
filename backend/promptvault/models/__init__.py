"""SQLAlchemy ORM models."""

from promptvault.models.user import User
from promptvault.models.prompt import Prompt, PromptCategory
from promptvault.models.purchase import Purchase
from promptvault.models.user_index import UserPurchase, UserLike, UserRating

__all__ = [
    "User",
    "Prompt",
    "PromptCategory",
    "Purchase",
    "UserPurchase",
    "UserLike",
    "UserRating",
]
