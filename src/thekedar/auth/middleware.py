from __future__ import annotations

from functools import wraps
from uuid import UUID

from flask import g, request

from ..core.exceptions import AuthenticationError
from .service import AuthService


def bearer_auth(auth_service: AuthService):
    """Build a view decorator that requires a valid ``Authorization: Bearer`` token.

    On success the token's claims are exposed as ``g.user_id`` and ``g.phone``.
    """

    def auth_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            if not header:
                raise AuthenticationError("authorization header required")

            parts = header.split(" ", 1)
            if len(parts) != 2 or parts[0] != "Bearer":
                raise AuthenticationError("invalid authorization header format")

            claims = auth_service.validate_token(parts[1])
            g.user_id = claims.user_id
            g.phone = claims.phone
            return view(*args, **kwargs)

        return wrapper

    return auth_required


def current_user_id() -> UUID:
    return g.user_id
