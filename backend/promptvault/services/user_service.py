"""User service — account creation and lookups."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from promptvault.database import transaction
from promptvault.errors import AlreadyExists, NotFound
from promptvault.models.user import User
from promptvault.services.validation import validate_username

logger = logging.getLogger(__name__)


def create_user(
    db: Session,
    caller: str,
    now: int,
    username: Optional[str] = None,
    email: Optional[str] = None,
) -> User:
    """Create the caller's user record with every counter at zero.

    A second call for the same caller is rejected rather than merged.
    """
    if db.get(User, caller) is not None:
        raise AlreadyExists("User already exists")
    validate_username(username)

    user = User(
        id=caller,
        username=username,
        email=email,
        joined_at=now,
        total_earnings=0,
        total_spent=0,
        prompts_created=0,
        prompts_purchased=0,
    )
    with transaction(db):
        db.add(user)
    db.refresh(user)
    logger.info("User created: %s", caller)
    return user


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def find_user(db: Session, user_id: str) -> Optional[User]:
    """Like get_user, but returns None instead of raising."""
    return db.get(User, user_id)
