from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from typing import Optional

from ...core.constants import OTP_LENGTH, OTP_SWEEP_SECONDS
from ..passcode_store import PasscodeStore, PasscodeSweeper


class OtpDeliveryError(Exception):
    """Raised when a passcode could not be handed to the delivery channel."""


def generate_code(length: int = OTP_LENGTH) -> str:
    return f"{secrets.randbelow(10 ** length):0{length}d}"


class OtpProvider(ABC):
    """One-time passcode provider (Strategy Pattern: mock vs SMS delivery).

    Every provider owns its passcode store and the sweeper that bounds it;
    the sweeper starts with the provider and stops on ``close()``.
    """

    def __init__(
        self,
        *,
        store: Optional[PasscodeStore] = None,
        sweep_seconds: float = OTP_SWEEP_SECONDS,
        start_sweeper: bool = True,
    ):
        self._store = store or PasscodeStore()
        self._sweeper = PasscodeSweeper(self._store, interval_seconds=sweep_seconds)
        if start_sweeper:
            self._sweeper.start()

    @property
    def store(self) -> PasscodeStore:
        return self._store

    @abstractmethod
    def _new_code(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def _deliver(self, phone: str, code: str) -> None:
        raise NotImplementedError

    def send_otp(self, phone: str) -> str:
        """Issue a passcode for ``phone``, replacing any pending one."""
        code = self._new_code()
        self._store.issue(phone, code)
        self._deliver(phone, code)
        return code

    def verify_otp(self, phone: str, code: str) -> bool:
        return self._store.verify(phone, code)

    def close(self) -> None:
        self._sweeper.stop()
