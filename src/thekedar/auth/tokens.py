from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable
from uuid import UUID

from jose import JWTError, jwt

from ..common.datetime_utils import utc_now
from ..core.constants import ACCESS_TOKEN_HOURS, JWT_ALGORITHM, REFRESH_TOKEN_DAYS
from ..core.exceptions import AuthenticationError
from ..users.model import User


@dataclass(frozen=True)
class SessionClaims:
    user_id: UUID
    phone: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str
    expires_at: datetime
    user: User


class SessionTokens:
    """Signs and verifies HS256 session tokens bound to a user id and phone."""

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = JWT_ALGORITHM,
        access_ttl: timedelta = timedelta(hours=ACCESS_TOKEN_HOURS),
        refresh_ttl: timedelta = timedelta(days=REFRESH_TOKEN_DAYS),
        clock: Callable[[], datetime] = utc_now,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._clock = clock

    def _encode(self, user: User, issued_at: datetime, expires_at: datetime) -> str:
        claims = {
            "user_id": str(user.id),
            "phone": user.phone,
            "sub": str(user.id),
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def issue(self, user: User) -> TokenPair:
        now = self._clock()
        access_expiry = now + self._access_ttl
        return TokenPair(
            access_token=self._encode(user, now, access_expiry),
            refresh_token=self._encode(user, now, now + self._refresh_ttl),
            expires_at=access_expiry,
            user=user,
        )

    def decode(self, token: str) -> SessionClaims:
        """Verify signature, algorithm and expiry.

        Every failure raises the same AuthenticationError so callers cannot
        tell a malformed token from an expired or forged one.
        """

        if not token or not isinstance(token, str):
            raise AuthenticationError("invalid or expired token")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
            return SessionClaims(
                user_id=UUID(str(payload["user_id"])),
                phone=str(payload["phone"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
            )
        except (JWTError, KeyError, TypeError, ValueError):
            raise AuthenticationError("invalid or expired token") from None
