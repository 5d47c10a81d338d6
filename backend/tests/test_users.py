"""Tests for user creation and lookup."""

import pytest

from promptvault.errors import AlreadyExists, InvalidInput, NotFound
from promptvault.services import user_service


class TestCreateUser:
    """Test one-per-principal user creation."""

    def test_counters_start_at_zero(self, db, clock):
        now = clock()
        user = user_service.create_user(db, "alice", now, "Alice", "alice@example.com")
        assert user.id == "alice"
        assert user.username == "Alice"
        assert user.email == "alice@example.com"
        assert user.joined_at == now
        assert (user.total_earnings, user.total_spent) == (0, 0)
        assert (user.prompts_created, user.prompts_purchased) == (0, 0)

    def test_anonymous_fields_allowed(self, db, clock):
        user = user_service.create_user(db, "anon", clock())
        assert user.username is None
        assert user.email is None

    def test_second_creation_rejected(self, db, clock, make_user):
        make_user("alice", username="Alice")
        with pytest.raises(AlreadyExists, match="User already exists"):
            user_service.create_user(db, "alice", clock(), "Other")
        assert user_service.get_user(db, "alice").username == "Alice"

    def test_invalid_username_rejected(self, db, clock):
        with pytest.raises(InvalidInput):
            user_service.create_user(db, "alice", clock(), "x" * 51)
        assert user_service.find_user(db, "alice") is None


class TestGetUser:
    """Test user lookups."""

    def test_unknown_user(self, db):
        with pytest.raises(NotFound, match="User not found"):
            user_service.get_user(db, "nobody")
        assert user_service.find_user(db, "nobody") is None

    def test_existing_user(self, db, make_user):
        make_user("alice")
        assert user_service.get_user(db, "alice").id == "alice"
