"""Purchase service — records purchases and the bookkeeping around them.

No funds move here. A purchase appends to the immutable purchase log and
updates the counters that mirror it; settling payment is left to whatever
payment rail sits in front of this service.
"""

import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from promptvault.database import transaction
from promptvault.errors import AlreadyPurchased, InvalidInput, SelfPurchase
from promptvault.models.purchase import Purchase
from promptvault.models.user import User
from promptvault.models.user_index import UserPurchase
from promptvault.services import access
from promptvault.services.prompt_service import load_prompt
from promptvault.services.validation import MAX_AMOUNT

logger = logging.getLogger(__name__)


def purchase_prompt(db: Session, caller: str, now: int, prompt_id: int) -> str:
    """Buy access to a prompt.

    Steps, all within a single transaction:
    1. Append the purchase fact to the log
    2. Add the prompt to the buyer's purchase index
    3. Bump the prompt's purchase counter
    4. Charge the buyer's ledger and credit the seller's
    """
    prompt = load_prompt(db, prompt_id)
    if access.is_author(caller, prompt):
        raise SelfPurchase("Cannot purchase your own prompt")
    if access.has_purchased(db, caller, prompt_id):
        raise AlreadyPurchased("Prompt already purchased")

    price = prompt.price
    seller_id = prompt.author
    # Either side may not have a user record; their ledgers are skipped
    buyer = db.get(User, caller)
    seller = db.get(User, seller_id)
    if buyer is not None and buyer.total_spent + price > MAX_AMOUNT:
        raise InvalidInput("Purchase would overflow the buyer's spending ledger")
    if seller is not None and seller.total_earnings + price > MAX_AMOUNT:
        raise InvalidInput("Purchase would overflow the seller's earnings ledger")

    with transaction(db):
        db.add(Purchase(
            prompt_id=prompt_id,
            buyer=caller,
            seller=seller_id,
            price=price,
            timestamp=now,
        ))
        db.add(UserPurchase(user_id=caller, prompt_id=prompt_id))
        prompt.purchases += 1

        if buyer is not None:
            buyer.prompts_purchased += 1
            buyer.total_spent += price
        if seller is not None:
            seller.total_earnings += price

    logger.info("Prompt %s purchased by %s from %s for %s", prompt_id, caller, seller_id, price)
    return "Purchase successful"


def get_user_purchases(db: Session, user_id: str) -> list[int]:
    """Prompt ids in the user's purchase index, oldest first.

    Unknown users and users without purchases both get an empty list.
    Ids of deleted prompts are kept.
    """
    rows = (
        db.query(UserPurchase.prompt_id)
        .filter(UserPurchase.user_id == user_id)
        .order_by(UserPurchase.id)
        .all()
    )
    return [r.prompt_id for r in rows]


def get_purchase_history(db: Session, user_id: str) -> list[Purchase]:
    """Purchase log entries where the user was buyer or seller, in log order."""
    return (
        db.query(Purchase)
        .filter(or_(Purchase.buyer == user_id, Purchase.seller == user_id))
        .order_by(Purchase.id)
        .all()
    )
