"""Unit tests for PasswordHashingService."""

from keyward_identity.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("Secure_password1")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_hash_never_equals_raw_password(self):
        password = "Abcdef1!"

        assert self.service.hash(password) != password

    def test_hash_uses_configured_rounds(self):
        hashed = self.service.hash("Abcdef1!")

        assert hashed.split("$")[2] == "04"

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        hashed = self.service.hash("My_secret_password1")

        assert self.service.verify("My_secret_password1", hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("My_secret_password1")

        assert self.service.verify("My_secret_password2", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_produces_different_hashes(self):
        """Hashing the same password twice produces different salted hashes."""
        password = "Same_password1"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        assert hash1 != hash2
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    def test_verify_unencodable_password_returns_false(self):
        """A lone surrogate cannot be encoded, so it never matches."""
        hashed = self.service.hash("My_secret_password1")

        assert self.service.verify("My_secret\ud800", hashed) is False
