"""Access control predicates.

Evaluated fresh against the record store on every call; nothing is cached.
"""

from sqlalchemy.orm import Session

from promptvault.models.prompt import Prompt
from promptvault.models.user_index import UserPurchase


def is_author(caller: str, prompt: Prompt) -> bool:
    return prompt.author == caller


def has_purchased(db: Session, caller: str, prompt_id: int) -> bool:
    """Whether prompt_id is in the caller's purchase index."""
    return (
        db.query(UserPurchase.id)
        .filter(UserPurchase.user_id == caller, UserPurchase.prompt_id == prompt_id)
        .first()
        is not None
    )


def can_view_content(db: Session, caller: str, prompt: Prompt) -> bool:
    return prompt.is_public or is_author(caller, prompt) or has_purchased(db, caller, prompt.id)


def can_rate(db: Session, caller: str, prompt: Prompt) -> bool:
    if is_author(caller, prompt):
        return False
    return prompt.is_public or has_purchased(db, caller, prompt.id)


def can_modify(caller: str, prompt: Prompt) -> bool:
    """Only the author may update or delete a prompt. There is no admin override."""
    return is_author(caller, prompt)
