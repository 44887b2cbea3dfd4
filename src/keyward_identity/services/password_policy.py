"""Password strength policy.

The policy is pure: it inspects a string and reports which rules are
broken, it never raises.
"""

from enum import Enum

from keyward_identity.exceptions import PasswordPolicyViolation

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class PolicyRule(str, Enum):
    """Password strength rules, in the order they are checked."""

    MIN_LENGTH = "min_length"
    ENCODING = "encoding"
    MAX_LENGTH = "max_length"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"

    @property
    def message(self) -> str:
        return _RULE_MESSAGES[self]


_RULE_MESSAGES = {
    PolicyRule.MIN_LENGTH: "Password must be at least 8 characters long",
    PolicyRule.ENCODING: "Password contains characters that cannot be stored",
    PolicyRule.MAX_LENGTH: "Password cannot exceed 72 bytes",
    PolicyRule.UPPERCASE: "Password must contain at least one uppercase letter",
    PolicyRule.LOWERCASE: "Password must contain at least one lowercase letter",
    PolicyRule.DIGIT: "Password must contain at least one number",
    PolicyRule.SPECIAL: "Password must contain at least one special character",
}


class PasswordPolicy:
    """Checks passwords against the strength rules.

    ``HASHABLE_RULES`` are the rules bcrypt itself depends on; they are
    applied even where strength checking is switched off.

    Examples
    --------
    >>> policy = PasswordPolicy()
    >>> policy.validate("Abcdef1!") is None
    True
    >>> policy.validate("abc12345").rule
    <PolicyRule.UPPERCASE: 'uppercase'>
    """

    MIN_LENGTH = 8
    # bcrypt only reads the first 72 bytes of its input
    MAX_BYTES = 72
    HASHABLE_RULES = frozenset({PolicyRule.ENCODING, PolicyRule.MAX_LENGTH})

    def violations(self, password: str) -> list[PolicyRule]:
        """Return every rule the password breaks, in check order."""
        broken = []
        if len(password) < self.MIN_LENGTH:
            broken.append(PolicyRule.MIN_LENGTH)
        try:
            encoded = password.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates
            broken.append(PolicyRule.ENCODING)
            encoded = password.encode("utf-8", errors="surrogatepass")
        if len(encoded) > self.MAX_BYTES:
            broken.append(PolicyRule.MAX_LENGTH)
        if not any(ch.isupper() for ch in password):
            broken.append(PolicyRule.UPPERCASE)
        if not any(ch.islower() for ch in password):
            broken.append(PolicyRule.LOWERCASE)
        if not any(ch.isdecimal() for ch in password):
            broken.append(PolicyRule.DIGIT)
        if not any(ch in SPECIAL_CHARACTERS for ch in password):
            broken.append(PolicyRule.SPECIAL)
        return broken

    def validate(
        self,
        password: str,
        rules: frozenset[PolicyRule] | None = None,
    ) -> PasswordPolicyViolation | None:
        """Return the first violation, or None if the password is acceptable.

        When ``rules`` is given, only those rules are considered.
        """
        broken = self.violations(password)
        if rules is not None:
            broken = [rule for rule in broken if rule in rules]
        if not broken:
            return None
        return PasswordPolicyViolation(broken[0])

    def is_acceptable(self, password: str) -> bool:
        return not self.violations(password)
