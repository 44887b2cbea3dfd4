"""bcrypt hashing of account passwords."""

import bcrypt


class PasswordHashingService:
    """Turns raw passwords into salted bcrypt hashes and checks them.

    The service does not judge passwords. Callers run ``PasswordPolicy``
    first, which also guarantees the input is valid UTF-8 and fits in
    bcrypt's 72 byte window; ``hash`` assumes both.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("Abcdef1!")
    >>> service.verify("Abcdef1!", stored)
    True
    >>> service.verify("Abcdef1?", stored)
    False
    """

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor; each step doubles the hashing time.
            Tests use 4, the smallest value bcrypt accepts.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return a freshly salted hash of ``password`` as ASCII text."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        Never raises: a corrupt hash, or a password bcrypt cannot take,
        simply does not match.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # UnicodeEncodeError is a ValueError
            return False
