from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class Labour:
    """Domain entity: a labourer profile, shared across projects."""

    id: UUID
    name: str
    phone: str
    daily_wage: Decimal
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProjectLabour:
    """Assignment that makes a labourer eligible for a project's records."""

    project_id: UUID
    labour_id: UUID
    assigned_at: datetime
