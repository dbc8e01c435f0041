from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class User:
    """Domain entity: a contractor identified by a verified phone number.

    Plain data object (no DB access code).
    """

    id: UUID
    phone: str
    name: str
    created_at: datetime
    updated_at: datetime
