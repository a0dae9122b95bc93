"""
Token Signer/Verifier

Issues and validates the HS256 JWT session tokens handed out on register and
login. Tokens are stateless: there is no revocation list, so a token stays
valid until it expires even after the client logs out.
"""

from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel, ValidationError


class TokenError(Exception):
    """Base class for token verification failures"""


class TokenMalformed(TokenError):
    """Token cannot be parsed or lacks required claims"""


class TokenInvalid(TokenError):
    """Signature does not match"""


class TokenExpired(TokenError):
    """Token is past its expiry"""


class Claims(BaseModel):
    """Identity claims carried inside a session token"""

    user_id: int
    username: str
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """
    Session token issuer/verifier.

    The signing secret is supplied by the caller (loaded once from config at
    startup) so tests can run with fixed secrets.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        validity: timedelta = timedelta(hours=24),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.validity = validity

    def issue(
        self,
        user_id: int,
        username: str,
        email: str,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Generate a signed session token

        Args:
            user_id: User ID
            username: Username
            email: User email
            now: Issue time (defaults to current time)

        Returns:
            JWT token string, expiring `validity` after issue
        """
        issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
        payload = {
            "user_id": user_id,
            "username": username,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.validity,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Claims:
        """
        Verify a session token and return its claims

        Raises:
            TokenMalformed: token is not a parseable JWT or misses claims
            TokenInvalid: signature does not match
            TokenExpired: current time is past the exp claim
        """
        try:
            jwt.get_unverified_header(token)
        except JWTError as exc:
            raise TokenMalformed("Token is malformed") from exc

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpired("Token has expired") from exc
        except JWTError as exc:
            raise TokenInvalid("Token signature is invalid") from exc

        try:
            return Claims(
                user_id=payload["user_id"],
                username=payload["username"],
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise TokenMalformed("Token is missing required claims") from exc
