"""Tests for input validation helpers."""

import pytest

from services.validation_service import (
    is_valid_room_id,
    is_valid_username,
    is_valid_variable_map,
)


class TestUsername:
    """Test is_valid_username."""

    @pytest.mark.parametrize("username", ["griffpatch", "Alice_99", "a", "x-y", "A" * 29])
    def test_valid(self, username):
        assert is_valid_username(username)

    @pytest.mark.parametrize(
        "username",
        ["", "A" * 30, "a b", "name!", "ünïcode", "alice\n", None, 42, ["alice"]],
    )
    def test_invalid(self, username):
        assert not is_valid_username(username)


class TestRoomID:
    """Test is_valid_room_id."""

    @pytest.mark.parametrize("room_id", ["0", "104", "123456789012"])
    def test_valid(self, room_id):
        assert is_valid_room_id(room_id)

    @pytest.mark.parametrize("room_id", ["", "12a", "-1", "1.5", " 1", "12\n", "١٢٣", 104, None])
    def test_invalid(self, room_id):
        assert not is_valid_room_id(room_id)


class TestVariableMap:
    """Test is_valid_variable_map."""

    @pytest.mark.parametrize("obj", [{}, {"☁ a": "1"}, {"not cloud": 5}, []])
    def test_valid(self, obj):
        assert is_valid_variable_map(obj)

    @pytest.mark.parametrize("obj", [None, "", "{}", 0, 1, True])
    def test_invalid(self, obj):
        assert not is_valid_variable_map(obj)
