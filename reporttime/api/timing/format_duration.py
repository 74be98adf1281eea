"""Convert fractional seconds into a FormattedDuration."""

from decimal import ROUND_DOWN, Decimal, localcontext

from ...constants import MAX_PRECISION
from .FormattedDuration import FormattedDuration

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def format_duration(elapsed_seconds: Decimal | float | int, precision: int) -> FormattedDuration:
    """Split a duration into days, hours, minutes and seconds and pretty-print it.

    The value is truncated, never rounded, to ``precision`` decimals, so 4.9999
    at precision 3 reads ``4.999``. Negative or non-finite input counts as zero
    and precision is clamped to 0-9, which makes the function total.

    Units are included left to right once they are non-zero or a larger unit is
    already shown; seconds always appear, padded to two integer digits. A single
    leading ``0`` character is then removed from the whole string, turning
    ``03:02:14.100`` into ``3:02:14.100`` and ``00.000`` into ``0.000``.

    Args:
        elapsed_seconds: Duration in seconds
        precision: Number of fractional-second digits

    Returns:
        FormattedDuration with the unit fields and the pretty string
    """
    precision = min(max(int(precision), 0), MAX_PRECISION)
    value = elapsed_seconds if isinstance(elapsed_seconds, Decimal) else Decimal(str(elapsed_seconds))
    if not value.is_finite() or value < 0:
        value = Decimal(0)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + precision + 2)
        truncated = value.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_DOWN)
        whole = int(truncated)
        fraction = truncated - whole

        days = whole // SECONDS_PER_DAY
        hours = (whole // SECONDS_PER_HOUR) % 24
        minutes = (whole // SECONDS_PER_MINUTE) % 60
        seconds = (whole % SECONDS_PER_MINUTE) + fraction

    pretty = ""
    if days == 1:
        pretty = "1day, "
    elif days > 1:
        pretty = f"{days}days, "
    if hours > 0 or pretty:
        pretty += f"{hours:02d}:"
    if minutes > 0 or pretty:
        pretty += f"{minutes:02d}:"
    width = 2 + (precision + 1 if precision else 0)
    pretty += format(seconds, f"0{width}.{precision}f")
    if pretty.startswith("0"):
        pretty = pretty[1:]

    return FormattedDuration(
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        elapsed=truncated,
        precision=precision,
        pretty=pretty,
    )
