from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from ..labours.model import Labour


@dataclass(frozen=True)
class Project:
    """Domain entity: a project owned by exactly one user."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProjectWithLabours:
    """Read-model: a project together with its assigned labourers."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
    labours: list[Labour] = field(default_factory=list)
