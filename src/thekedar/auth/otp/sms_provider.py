from __future__ import annotations

import logging
from typing import Optional, Protocol

import httpx

from ...core.constants import OTP_TTL_MINUTES
from .base import OtpDeliveryError, OtpProvider, generate_code

logger = logging.getLogger(__name__)


class SmsGateway(Protocol):
    def send(self, phone: str, message: str) -> None:
        raise NotImplementedError


class HttpSmsGateway:
    """Posts messages to an HTTP SMS gateway as ``{"to": ..., "message": ...}``."""

    def __init__(
        self,
        url: str,
        *,
        token: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not url:
            raise ValueError("SMS gateway URL is not configured")
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._url = url
        self._client = httpx.Client(timeout=timeout, headers=headers, transport=transport)

    def send(self, phone: str, message: str) -> None:
        try:
            response = self._client.post(self._url, json={"to": phone, "message": message})
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise OtpDeliveryError(f"SMS gateway rejected message: {e}") from e

    def close(self) -> None:
        self._client.close()


class SmsOtpProvider(OtpProvider):
    """Production provider: random codes delivered through an SMS gateway."""

    def __init__(self, gateway: SmsGateway, **kwargs):
        super().__init__(**kwargs)
        self._gateway = gateway

    def _new_code(self) -> str:
        return generate_code()

    def _deliver(self, phone: str, code: str) -> None:
        message = f"Your verification code is {code}. It expires in {OTP_TTL_MINUTES} minutes."
        self._gateway.send(phone, message)
        logger.info("OTP sent to phone %s", phone)

    def close(self) -> None:
        super().close()
        close = getattr(self._gateway, "close", None)
        if close:
            close()
