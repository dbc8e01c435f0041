from __future__ import annotations

from datetime import date
from decimal import Decimal

from flask.json.provider import DefaultJSONProvider


def _default(o):
    # Flask renders dates as HTTP dates; the API speaks ISO-8601.
    if isinstance(o, date):
        return o.isoformat()
    return DefaultJSONProvider.default(o)


class DecimalJSONProvider(DefaultJSONProvider):
    """JSON provider that keeps money exact in both directions.

    Incoming numbers with a fraction are parsed as Decimal, never float;
    outgoing Decimal values are rendered as strings.
    """

    default = staticmethod(_default)

    def loads(self, s, **kwargs):
        kwargs.setdefault("parse_float", Decimal)
        return super().loads(s, **kwargs)
