from __future__ import annotations

import logging

from ...core.constants import FIXED_OTP_CODE
from .base import OtpProvider, generate_code

logger = logging.getLogger(__name__)


class MockOtpProvider(OtpProvider):
    """Development provider: nothing is sent, the code is logged and returned."""

    def __init__(self, *, use_fixed_code: bool = False, **kwargs):
        super().__init__(**kwargs)
        self._use_fixed_code = bool(use_fixed_code)

    def _new_code(self) -> str:
        if self._use_fixed_code:
            return FIXED_OTP_CODE
        return generate_code()

    def _deliver(self, phone: str, code: str) -> None:
        logger.info("[MOCK OTP] Sent OTP %s to phone %s", code, phone)
