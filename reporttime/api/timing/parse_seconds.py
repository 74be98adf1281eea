"""Parse a seconds value given as text."""

from decimal import Decimal, InvalidOperation


def parse_seconds(value: str | float | int | Decimal) -> Decimal:
    """Parse ``value`` (e.g. ``1700000000.123456789``) into exact decimal seconds.

    Raises:
        ValueError: If the value is not a finite number
    """
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a number of seconds: {value!r}") from None
    if not parsed.is_finite():
        raise ValueError(f"Not a finite number of seconds: {value!r}")
    return parsed
