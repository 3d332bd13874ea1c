"""
Unit tests for PBKDF2 password hashing.
"""

import pytest

from propman.core.security import (
    DEFAULT_ITERATIONS,
    KEY_SIZE,
    SALT_SIZE,
    effective_iterations,
    get_password_hash,
    verify_password,
)

pytestmark = pytest.mark.unit

ITERATIONS = 1000


class TestPasswordHashing:
    """Test password hashing and verification."""

    def test_hash_sizes(self):
        hashed = get_password_hash("testpassword123", ITERATIONS)

        assert len(hashed.hash) == KEY_SIZE
        assert len(hashed.salt) == SALT_SIZE
        assert hashed.iterations == ITERATIONS

    def test_default_iterations(self):
        assert get_password_hash("testpassword123").iterations == DEFAULT_ITERATIONS == 150_000

    def test_salt_differs_each_time(self):
        first = get_password_hash("testpassword123", ITERATIONS)
        second = get_password_hash("testpassword123", ITERATIONS)

        assert first.salt != second.salt
        assert first.hash != second.hash

    def test_verify_correct(self):
        hashed = get_password_hash("testpassword123", ITERATIONS)
        assert verify_password("testpassword123", hashed.hash, hashed.salt, ITERATIONS) is True

    def test_verify_incorrect(self):
        hashed = get_password_hash("testpassword123", ITERATIONS)
        assert verify_password("wrongpassword", hashed.hash, hashed.salt, ITERATIONS) is False

    def test_verify_with_other_iteration_count_fails(self):
        hashed = get_password_hash("testpassword123", ITERATIONS)
        assert verify_password("testpassword123", hashed.hash, hashed.salt, ITERATIONS + 1) is False

    def test_verify_missing_inputs(self):
        hashed = get_password_hash("testpassword123", ITERATIONS)

        assert verify_password("", hashed.hash, hashed.salt, ITERATIONS) is False
        assert verify_password("testpassword123", None, hashed.salt, ITERATIONS) is False
        assert verify_password("testpassword123", hashed.hash, None, ITERATIONS) is False

    @pytest.mark.parametrize("password", ["", "   "])
    def test_blank_password_rejected(self, password):
        with pytest.raises(ValueError):
            get_password_hash(password, ITERATIONS)


class TestEffectiveIterations:
    """Test the stored iteration count fallback."""

    @pytest.mark.parametrize("stored, expected", [
        (None, 150_000),
        (0, 150_000),
        (-5, 150_000),
        (20_000, 20_000),
    ])
    def test_values(self, stored, expected):
        assert effective_iterations(stored) == expected
