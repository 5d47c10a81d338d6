"""Input validation — pure checks run before any mutation.

Each check raises InvalidInput on the first rule it finds broken; callers
never get a list of every violation.
"""

from typing import Optional

from promptvault.config import settings
from promptvault.errors import InvalidInput
from promptvault.rating import MIN_RATING, MAX_RATING

# Largest amount a price or ledger column can hold (signed 64-bit)
MAX_AMOUNT = 2**63 - 1


def validate_title(title: str) -> None:
    if not title.strip():
        raise InvalidInput("Title cannot be empty")
    # Bound applies to the raw, untrimmed title
    if len(title) > settings.MAX_TITLE_LENGTH:
        raise InvalidInput(f"Title cannot exceed {settings.MAX_TITLE_LENGTH} characters")


def validate_description(description: str) -> None:
    if len(description) > settings.MAX_DESCRIPTION_LENGTH:
        raise InvalidInput(
            f"Description cannot exceed {settings.MAX_DESCRIPTION_LENGTH} characters"
        )


def validate_content(content: str) -> None:
    if not content.strip():
        raise InvalidInput("Content cannot be empty")
    if len(content) > settings.MAX_CONTENT_LENGTH:
        raise InvalidInput(f"Content cannot exceed {settings.MAX_CONTENT_LENGTH} characters")


def validate_tags(tags: list[str]) -> None:
    if len(tags) > settings.MAX_TAGS:
        raise InvalidInput(f"Cannot have more than {settings.MAX_TAGS} tags")
    for tag in tags:
        if len(tag) > settings.MAX_TAG_LENGTH:
            raise InvalidInput(f"Tag cannot exceed {settings.MAX_TAG_LENGTH} characters")


def validate_price(price: int) -> None:
    if price < 0 or price > MAX_AMOUNT:
        raise InvalidInput(f"Price must be between 0 and {MAX_AMOUNT}")


def validate_prompt_input(
    title: str,
    description: str,
    content: str,
    tags: list[str],
    price: int = 0,
) -> None:
    """Validate the fields of a new prompt in a fixed order."""
    validate_title(title)
    validate_description(description)
    validate_content(content)
    validate_tags(tags)
    validate_price(price)


# Checked in this order when present in a partial update
_UPDATE_CHECKS = (
    ("title", validate_title),
    ("description", validate_description),
    ("content", validate_content),
    ("tags", validate_tags),
    ("price", validate_price),
)


def validate_prompt_update(fields: dict) -> None:
    """Validate only the fields supplied in a partial update.

    An explicit null is not a way to clear a field and is rejected.
    """
    for name, value in fields.items():
        if value is None:
            raise InvalidInput(f"Field '{name}' cannot be null")
    for name, check in _UPDATE_CHECKS:
        if name in fields:
            check(fields[name])


def validate_rating(rating: int) -> None:
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidInput(f"Rating must be between {MIN_RATING} and {MAX_RATING}")


def validate_username(username: Optional[str]) -> None:
    if username is None:
        return
    if not username.strip() or len(username) > settings.MAX_USERNAME_LENGTH:
        raise InvalidInput(
            f"Username must be between 1 and {settings.MAX_USERNAME_LENGTH} characters"
        )
