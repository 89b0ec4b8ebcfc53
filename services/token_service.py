"""JWT issuing and verification for identity tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt


TOKEN_LIFETIME = timedelta(days=7)


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens.

    Tokens are stateless: a token is valid while its signature checks out
    and it has not expired. A per-user token epoch claim compared in
    verify() would be the place to add revocation.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm

    def issue(self, user_id: str, issued_at: Optional[datetime] = None) -> str:
        """
        Create a token for a user.

        Args:
            user_id: Identifier stored in the `sub` claim
            issued_at: Issue time, defaults to now. Expiry is issue time + 7 days.

        Returns:
            Encoded JWT string
        """
        issued_at = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + TOKEN_LIFETIME,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Optional[str]:
        """
        Decode and validate a token.

        Returns:
            The user id, or None when the token is malformed, forged, signed
            with another algorithm, expired, or has no subject
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except (JWTError, ValueError, TypeError, AttributeError):
            return None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            return None
        return user_id
