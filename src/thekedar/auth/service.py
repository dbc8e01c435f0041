from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.constants import OTP_LENGTH, PHONE_MAX_LENGTH, PHONE_MIN_LENGTH
from ..core.exceptions import AuthenticationError, InvalidPhoneError, ValidationError
from ..users.repository import UserRepository
from .otp import OtpProvider
from .tokens import SessionClaims, SessionTokens, TokenPair

logger = logging.getLogger(__name__)


def normalize_phone(phone) -> str:
    phone = require_non_empty(phone, "phone", error=InvalidPhoneError)
    if not PHONE_MIN_LENGTH <= len(phone) <= PHONE_MAX_LENGTH:
        raise InvalidPhoneError(f"phone must be {PHONE_MIN_LENGTH}-{PHONE_MAX_LENGTH} characters")
    return phone


class AuthService:
    """Use case: phone + OTP login and session token lifecycle."""

    def __init__(self, users: UserRepository, otp_provider: OtpProvider, tokens: SessionTokens):
        self._users = users
        self._otp = otp_provider
        self._tokens = tokens

    def send_otp(self, phone) -> None:
        self._otp.send_otp(normalize_phone(phone))

    def verify_otp(self, phone, code) -> TokenPair:
        phone = normalize_phone(phone)
        code = require_non_empty(code, "otp")
        if len(code) != OTP_LENGTH:
            raise ValidationError(f"otp must be {OTP_LENGTH} digits")

        if not self._otp.verify_otp(phone, code):
            raise AuthenticationError("invalid or expired OTP")

        user, created = self._users.get_or_create(phone)
        if created:
            logger.info("registered new user %s", user.id)
        return self._tokens.issue(user)

    def refresh(self, refresh_token) -> TokenPair:
        # TODO: refresh tokens stay valid until expiry; rotate them once a revocation table exists.
        try:
            claims = self._tokens.decode(refresh_token)
        except AuthenticationError:
            raise AuthenticationError("invalid refresh token") from None

        user = self._users.get_by_id(claims.user_id)
        if not user:
            raise AuthenticationError("invalid refresh token")
        return self._tokens.issue(user)

    def validate_token(self, token) -> SessionClaims:
        return self._tokens.decode(token)
