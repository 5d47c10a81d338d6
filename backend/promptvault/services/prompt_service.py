"""Prompt service — business logic for prompt CRUD, gated content, and search."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from promptvault.database import transaction
from promptvault.errors import AccessDenied, NotFound, Unauthorized, UserNotFound
from promptvault.models.prompt import Prompt, PromptCategory
from promptvault.models.user import User
from promptvault.rating import relevance_score
from promptvault.schemas.prompt import PromptCreate, PromptUpdate
from promptvault.services import access
from promptvault.services.validation import validate_prompt_input, validate_prompt_update

logger = logging.getLogger(__name__)


def load_prompt(db: Session, prompt_id: int) -> Prompt:
    """Fetch a prompt by id or raise NotFound."""
    prompt = db.get(Prompt, prompt_id)
    if prompt is None:
        raise NotFound("Prompt not found")
    return prompt


def _load_modifiable(db: Session, caller: str, prompt_id: int) -> Prompt:
    """Fetch a prompt the caller is allowed to update or delete.

    A missing prompt has no author, so it fails the authorship check the
    same way a prompt owned by someone else does.
    """
    prompt = db.get(Prompt, prompt_id)
    if prompt is None or not access.can_modify(caller, prompt):
        raise Unauthorized("Unauthorized")
    return prompt


def create_prompt(db: Session, caller: str, now: int, req: PromptCreate) -> Prompt:
    """Create a prompt authored by the caller.

    The title is stored trimmed, every counter starts at zero, and the
    author's prompts_created goes up by one in the same transaction.
    """
    validate_prompt_input(req.title, req.description, req.content, req.tags, req.price)

    author = db.get(User, caller)
    if author is None:
        raise UserNotFound("User not found. Please create a user first.")

    prompt = Prompt(
        title=req.title.strip(),
        description=req.description,
        content=req.content,
        author=caller,
        category=PromptCategory(req.category).value,
        tags=list(req.tags),
        price=req.price,
        is_premium=req.is_premium,
        is_public=req.is_public,
        created_at=now,
        updated_at=now,
        likes=0,
        purchases=0,
        rating=0.0,
        total_ratings=0,
    )
    with transaction(db):
        db.add(prompt)
        author.prompts_created += 1
    db.refresh(prompt)
    logger.info("Prompt %s created by %s", prompt.id, caller)
    return prompt


def get_prompt(db: Session, prompt_id: int) -> Prompt:
    """Exact lookup. Metadata is not access-filtered."""
    return load_prompt(db, prompt_id)


def get_public_prompts(db: Session) -> list[Prompt]:
    return db.query(Prompt).filter(Prompt.is_public.is_(True)).order_by(Prompt.id).all()


def get_user_prompts(db: Session, user_id: str) -> list[Prompt]:
    """All prompts authored by user_id, public or not."""
    return db.query(Prompt).filter(Prompt.author == user_id).order_by(Prompt.id).all()


def update_prompt(
    db: Session,
    caller: str,
    now: int,
    prompt_id: int,
    req: PromptUpdate,
) -> Prompt:
    """Apply a partial update. Fields absent from the request keep their values.

    Every supplied field is validated before anything is written, and
    updated_at is refreshed even when no field is supplied.
    """
    prompt = _load_modifiable(db, caller, prompt_id)

    fields = req.supplied()
    validate_prompt_update(fields)

    with transaction(db):
        if "title" in fields:
            prompt.title = fields["title"].strip()
        if "description" in fields:
            prompt.description = fields["description"]
        if "content" in fields:
            prompt.content = fields["content"]
        if "category" in fields:
            prompt.category = PromptCategory(fields["category"]).value
        if "tags" in fields:
            prompt.tags = list(fields["tags"])
        if "price" in fields:
            prompt.price = fields["price"]
        if "is_premium" in fields:
            prompt.is_premium = fields["is_premium"]
        if "is_public" in fields:
            prompt.is_public = fields["is_public"]
        prompt.updated_at = now
    db.refresh(prompt)
    logger.info("Prompt %s updated by %s (%s)", prompt_id, caller, ", ".join(sorted(fields)) or "no fields")
    return prompt


def delete_prompt(db: Session, caller: str, prompt_id: int) -> str:
    """Remove a prompt record.

    Purchase history and the per-user purchase, like and rating indexes
    keep their references to the deleted id.
    """
    prompt = _load_modifiable(db, caller, prompt_id)

    with transaction(db):
        db.delete(prompt)
        author = db.get(User, caller)
        if author is not None and author.prompts_created > 0:
            author.prompts_created -= 1
    logger.info("Prompt %s deleted by %s", prompt_id, caller)
    return "Prompt deleted successfully"


def get_prompt_content(db: Session, caller: str, prompt_id: int) -> str:
    """Return the prompt text if the caller may view it."""
    prompt = load_prompt(db, prompt_id)
    if not access.can_view_content(db, caller, prompt):
        raise AccessDenied("Access denied. Purchase required.")
    return prompt.content


def _matches(prompt: Prompt, needle: str) -> bool:
    if needle in prompt.title.lower():
        return True
    if needle in prompt.description.lower():
        return True
    return any(needle in tag.lower() for tag in prompt.tags)


def search_prompts(
    db: Session,
    query: str,
    category: Optional[PromptCategory] = None,
) -> list[Prompt]:
    """Case-insensitive substring search over public prompts.

    Matches title, description or any tag. Results are ranked by
    likes + purchases + floor(rating * 10), highest first; ties keep
    creation order.
    """
    q = db.query(Prompt).filter(Prompt.is_public.is_(True))
    if category is not None:
        q = q.filter(Prompt.category == PromptCategory(category).value)

    needle = query.lower()
    results = [p for p in q.order_by(Prompt.id).all() if _matches(p, needle)]
    results.sort(key=lambda p: relevance_score(p.likes, p.purchases, p.rating), reverse=True)
    return results
