"""Session token service.

Signs and verifies the bearer tokens handed out after a successful login.
"""

from datetime import datetime, timedelta, timezone

import jwt

from keyward_identity.exceptions import InvalidSessionTokenError
from keyward_identity.schemas import SessionPayload, SessionToken

SESSION_TOKEN_TYPE = "session"


class SessionTokenService:
    """Service for session token creation and verification.

    Tokens are HS256 JWTs whose subject is the username. Nothing is
    stored server side; the signature and ``exp`` claim carry validity.

    Examples
    --------
    >>> service = SessionTokenService(secret_key="your-secret-key")
    >>> session = service.issue("alice")
    >>> service.validate(session.access_token).username
    'alice'
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the session token service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_hours
            Hours until a session token expires (default 24)
        """
        if not secret_key:
            msg = "Session secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=expire_hours)

    def issue(
        self,
        username: str,
        expires_delta: timedelta | None = None,
    ) -> SessionToken:
        """Create a session token bound to ``username``.

        Parameters
        ----------
        username
            The authenticated user's username
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded token together with its expiry
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._expire)

        payload = {
            "sub": username,
            "type": SESSION_TOKEN_TYPE,
            "iat": now,
            "exp": expire,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

        return SessionToken(
            access_token=token,
            username=username,
            expires_at=datetime.fromtimestamp(int(expire.timestamp()), tz=timezone.utc),
        )

    def validate(self, token: str) -> SessionPayload:
        """Verify and decode a session token.

        Parameters
        ----------
        token
            The token string to verify

        Returns
        -------
        SessionPayload containing the decoded data

        Raises
        ------
        InvalidSessionTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )

            if payload.get("type") != SESSION_TOKEN_TYPE:
                msg = "Not a session token"
                raise InvalidSessionTokenError(msg)

            username = payload["sub"]
            if not isinstance(username, str) or not username:
                msg = "Malformed session token"
                raise InvalidSessionTokenError(msg)

            return SessionPayload(
                username=username,
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidSessionTokenError("Session token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidSessionTokenError from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSessionTokenError("Malformed session token") from e
