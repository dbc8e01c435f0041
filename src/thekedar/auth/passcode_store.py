from __future__ import annotations

import hmac
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from ..common.datetime_utils import utc_now
from ..core.constants import OTP_SWEEP_SECONDS, OTP_TTL_MINUTES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingPasscode:
    code: str
    expires_at: datetime


class PasscodeStore:
    """Lock-guarded map of phone number -> the one pending passcode.

    ``issue``, ``verify`` and ``sweep`` are the only mutators. A passcode is
    pending until it is consumed by a matching ``verify``, replaced by a newer
    ``issue`` or found expired.
    """

    def __init__(
        self,
        *,
        ttl: timedelta = timedelta(minutes=OTP_TTL_MINUTES),
        clock: Callable[[], datetime] = utc_now,
    ):
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._pending: Dict[str, PendingPasscode] = {}

    def issue(self, phone: str, code: str) -> PendingPasscode:
        pending = PendingPasscode(code=code, expires_at=self._clock() + self._ttl)
        with self._lock:
            self._pending[phone] = pending
        return pending

    def verify(self, phone: str, code: str) -> bool:
        with self._lock:
            pending = self._pending.get(phone)
            if pending is None:
                return False

            if self._clock() > pending.expires_at:
                del self._pending[phone]
                return False

            if not hmac.compare_digest(pending.code.encode(), str(code).encode()):
                return False

            del self._pending[phone]
            return True

    def sweep(self) -> int:
        """Drop expired, unconsumed passcodes; returns how many were dropped."""
        now = self._clock()
        with self._lock:
            expired = [phone for phone, p in self._pending.items() if now > p.expires_at]
            for phone in expired:
                del self._pending[phone]
        return len(expired)

    def peek(self, phone: str) -> Optional[PendingPasscode]:
        with self._lock:
            return self._pending.get(phone)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)


class PasscodeSweeper:
    """Periodic task that sweeps a PasscodeStore until stopped."""

    def __init__(self, store: PasscodeStore, *, interval_seconds: float = OTP_SWEEP_SECONDS):
        self._store = store
        self._interval = float(interval_seconds)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="passcode-sweeper", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self) -> None:
        while not self._stop.wait(self._interval):
            removed = self._store.sweep()
            if removed:
                logger.debug("swept %d expired passcode(s)", removed)
