"""Unit tests for PasswordHashingService."""

import pytest

from tessera_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Hash is a bcrypt digest, never the plaintext."""
        password = "secure_password123"
        hashed = self.service.hash(password)

        assert hashed.startswith("$2")
        assert len(hashed) == 60
        assert password not in hashed

    def test_hash_uses_configured_rounds(self):
        hashed = self.service.hash("password")

        assert hashed.split("$")[2] == "04"
        assert self.service.rounds == 4

    def test_default_rounds(self):
        assert PasswordHashingService().rounds == 12

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """A corrupted or empty digest denies instead of raising."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_produces_different_hashes(self):
        """Hashing the same password twice gives two digests that both verify."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        assert hash1 != hash2
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    def test_verify_with_other_service_instance(self):
        """Verification does not depend on the work factor of the verifier."""
        hashed = self.service.hash("portable")

        assert PasswordHashingService(rounds=10).verify("portable", hashed)

    def test_unicode_password(self):
        password = "pässwörd-日本語"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)
        assert not self.service.verify("passwort-日本語", hashed)

    def test_password_of_exactly_72_bytes(self):
        password = "a" * 72
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)
        assert not self.service.verify("a" * 71, hashed)

    def test_hash_rejects_password_longer_than_72_bytes(self):
        """Over-long passwords are refused instead of silently truncated."""
        with pytest.raises(ValueError, match="72 bytes"):
            self.service.hash("a" * 73)

    def test_limit_counts_utf8_bytes(self):
        # 25 three-byte characters: 25 chars, 75 bytes
        with pytest.raises(ValueError):
            self.service.hash("日" * 25)

    def test_distinct_long_passwords_do_not_cross_verify(self):
        """Passwords sharing a 72-byte prefix never verify against each other."""
        base = "x" * 72
        hashed = self.service.hash(base)

        assert self.service.verify(base + "1", hashed) is False
        assert self.service.verify(base + "2", hashed) is False

    def test_verify_over_long_candidate_returns_false(self):
        hashed = self.service.hash("short-password")

        assert self.service.verify("z" * 200, hashed) is False

    def test_verify_dummy_is_always_false(self):
        assert self.service.verify_dummy("anything") is False
        assert self.service.verify_dummy("x" * 200) is False
