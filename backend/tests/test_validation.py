"""Tests for input validation (pure functions, no DB dependency)."""

import pytest

from promptvault.errors import InvalidInput
from promptvault.services.validation import (
    MAX_AMOUNT,
    validate_prompt_input,
    validate_prompt_update,
    validate_price,
    validate_rating,
    validate_username,
)


def _valid(**overrides):
    fields = {
        "title": "Title",
        "description": "",
        "content": "Body",
        "tags": [],
    }
    fields.update(overrides)
    return fields


class TestPromptInput:
    """Test field bounds on new prompts."""

    def test_title_at_limit_accepted(self):
        validate_prompt_input(**_valid(title="t" * 100))

    def test_title_over_limit_rejected(self):
        with pytest.raises(InvalidInput, match="Title cannot exceed 100"):
            validate_prompt_input(**_valid(title="t" * 101))

    def test_blank_title_rejected(self):
        with pytest.raises(InvalidInput, match="Title cannot be empty"):
            validate_prompt_input(**_valid(title="   "))

    def test_title_bound_uses_untrimmed_length(self):
        """Surrounding whitespace still counts toward the title bound."""
        with pytest.raises(InvalidInput):
            validate_prompt_input(**_valid(title=" " + "t" * 100))

    def test_description_bounds(self):
        validate_prompt_input(**_valid(description="d" * 500))
        with pytest.raises(InvalidInput, match="Description"):
            validate_prompt_input(**_valid(description="d" * 501))

    def test_content_bounds(self):
        validate_prompt_input(**_valid(content="c" * 10000))
        with pytest.raises(InvalidInput, match="Content cannot exceed"):
            validate_prompt_input(**_valid(content="c" * 10001))
        with pytest.raises(InvalidInput, match="Content cannot be empty"):
            validate_prompt_input(**_valid(content="\n\t "))

    def test_tag_bounds(self):
        validate_prompt_input(**_valid(tags=["t" * 30] * 10))
        with pytest.raises(InvalidInput, match="more than 10 tags"):
            validate_prompt_input(**_valid(tags=["t"] * 11))
        with pytest.raises(InvalidInput, match="Tag cannot exceed 30"):
            validate_prompt_input(**_valid(tags=["ok", "t" * 31]))

    def test_first_violation_reported(self):
        """Only the first broken rule, in check order, is reported."""
        with pytest.raises(InvalidInput, match="Title cannot be empty"):
            validate_prompt_input(title="", description="d" * 600, content="", tags=["x"] * 20)
        with pytest.raises(InvalidInput, match="Description"):
            validate_prompt_input(title="ok", description="d" * 600, content="", tags=["x"] * 20)

    def test_price_fits_signed_64_bit(self):
        validate_price(0)
        validate_price(MAX_AMOUNT)
        with pytest.raises(InvalidInput, match="Price must be between"):
            validate_price(MAX_AMOUNT + 1)
        with pytest.raises(InvalidInput, match="Price must be between"):
            validate_prompt_input(**_valid(price=2**64 - 1))


class TestPromptUpdate:
    """Test validation of partial updates."""

    def test_only_supplied_fields_checked(self):
        validate_prompt_update({})
        validate_prompt_update({"price": 0, "is_public": False})

    def test_supplied_price_checked(self):
        validate_prompt_update({"price": MAX_AMOUNT})
        with pytest.raises(InvalidInput, match="Price"):
            validate_prompt_update({"price": 2**63})

    def test_supplied_title_checked(self):
        with pytest.raises(InvalidInput):
            validate_prompt_update({"title": "x" * 101})

    def test_supplied_tags_checked(self):
        with pytest.raises(InvalidInput):
            validate_prompt_update({"tags": ["t" * 31]})

    def test_explicit_null_rejected(self):
        with pytest.raises(InvalidInput, match="cannot be null"):
            validate_prompt_update({"content": None})


class TestRatingAndUsername:
    """Test rating range and username bounds."""

    @pytest.mark.parametrize("value", [1, 3, 5])
    def test_rating_in_range(self, value):
        validate_rating(value)

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_rating_out_of_range(self, value):
        with pytest.raises(InvalidInput, match="between 1 and 5"):
            validate_rating(value)

    def test_username_optional(self):
        validate_username(None)

    def test_username_bounds(self):
        validate_username("u" * 50)
        with pytest.raises(InvalidInput):
            validate_username("u" * 51)
        with pytest.raises(InvalidInput):
            validate_username("   ")
