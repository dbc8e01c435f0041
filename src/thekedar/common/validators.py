from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from uuid import UUID

from ..core.constants import MONEY_MAX_EXCLUSIVE, MONEY_SCALE
from ..core.exceptions import InvalidAmountError, ValidationError

_CENTS = Decimal(1).scaleb(-MONEY_SCALE)


def require_non_empty(value: Optional[str], field_name: str, *, error=ValidationError) -> str:
    if value is None or not str(value).strip():
        raise error(f"{field_name} is required")
    return str(value).strip()


def require_max_length(value: Optional[str], field_name: str, max_len: int, *, error=ValidationError) -> Optional[str]:
    if value is not None and len(value) > max_len:
        raise error(f"{field_name} must be at most {max_len} characters")
    return value


def optional_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_uuid(value: Any, field_name: str, *, error=ValidationError) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise error(f"invalid {field_name}") from None


def parse_decimal(value: Any, field_name: str) -> Decimal:
    """Parse a money value without going through binary floating point."""
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (bool, float)) or value is None:
        raise InvalidAmountError(f"invalid {field_name}")
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmountError(f"invalid {field_name}") from None
    if not amount.is_finite():
        raise InvalidAmountError(f"invalid {field_name}")
    if abs(amount) >= MONEY_MAX_EXCLUSIVE:
        raise InvalidAmountError(f"{field_name} is too large")
    if amount.quantize(_CENTS) != amount:
        raise InvalidAmountError(f"{field_name} must have at most {MONEY_SCALE} decimal places")
    return amount
