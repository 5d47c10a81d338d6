"""Engagement service — likes and ratings."""

import logging

from sqlalchemy.orm import Session

from promptvault.database import transaction
from promptvault.errors import AlreadyLiked, NotLiked, PurchaseRequired, SelfRating
from promptvault.models.user_index import UserLike, UserRating
from promptvault.rating import apply_rating
from promptvault.services import access
from promptvault.services.prompt_service import load_prompt
from promptvault.services.validation import validate_rating

logger = logging.getLogger(__name__)


def _find_like(db: Session, caller: str, prompt_id: int):
    return (
        db.query(UserLike)
        .filter(UserLike.user_id == caller, UserLike.prompt_id == prompt_id)
        .first()
    )


def like_prompt(db: Session, caller: str, prompt_id: int) -> str:
    prompt = load_prompt(db, prompt_id)
    if _find_like(db, caller, prompt_id) is not None:
        raise AlreadyLiked("Prompt already liked")

    with transaction(db):
        db.add(UserLike(user_id=caller, prompt_id=prompt_id))
        prompt.likes += 1
    logger.info("Prompt %s liked by %s", prompt_id, caller)
    return "Prompt liked successfully"


def unlike_prompt(db: Session, caller: str, prompt_id: int) -> str:
    prompt = load_prompt(db, prompt_id)
    like = _find_like(db, caller, prompt_id)
    if like is None:
        raise NotLiked("Prompt was not liked")

    with transaction(db):
        db.delete(like)
        if prompt.likes > 0:
            prompt.likes -= 1
    logger.info("Prompt %s unliked by %s", prompt_id, caller)
    return "Prompt unliked successfully"


def rate_prompt(db: Session, caller: str, prompt_id: int, rating: int) -> str:
    """Record or replace the caller's rating and fold it into the prompt's average.

    A repeat rating from the same caller replaces their earlier value and
    leaves total_ratings unchanged.
    """
    validate_rating(rating)
    prompt = load_prompt(db, prompt_id)
    if access.is_author(caller, prompt):
        raise SelfRating("Cannot rate your own prompt")
    if not access.can_rate(db, caller, prompt):
        raise PurchaseRequired("Must purchase prompt to rate it")

    existing = (
        db.query(UserRating)
        .filter(UserRating.user_id == caller, UserRating.prompt_id == prompt_id)
        .first()
    )
    previous = existing.value if existing is not None else None

    new_avg, new_count = apply_rating(prompt.rating, prompt.total_ratings, rating, previous)

    with transaction(db):
        if existing is None:
            db.add(UserRating(user_id=caller, prompt_id=prompt_id, value=rating))
        else:
            existing.value = rating
        prompt.rating = new_avg
        prompt.total_ratings = new_count
    logger.info("Prompt %s rated %s by %s", prompt_id, rating, caller)
    return "Prompt rated successfully"


def get_user_likes(db: Session, user_id: str) -> list[int]:
    """Liked prompt ids, oldest first. Empty for unknown users."""
    rows = (
        db.query(UserLike.prompt_id)
        .filter(UserLike.user_id == user_id)
        .order_by(UserLike.id)
        .all()
    )
    return [r.prompt_id for r in rows]


def get_user_ratings(db: Session, user_id: str) -> dict[int, int]:
    """Map of prompt id to the user's last submitted rating."""
    rows = (
        db.query(UserRating)
        .filter(UserRating.user_id == user_id)
        .order_by(UserRating.id)
        .all()
    )
    return {r.prompt_id: r.value for r in rows}
