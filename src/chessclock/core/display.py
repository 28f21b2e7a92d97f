"""Render durations for clock faces and log lines."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_up(value: float, places: int = 0) -> float:
    """Round *value* to *places* decimals, halves away from zero.

    Non-finite values are returned unchanged.

    >>> round_half_up(1.5)
    2.0
    >>> round_half_up(1.2345, 3)
    1.235
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_duration(seconds: float, precise: bool = False) -> str:
    """Format *seconds* as ``MM:SS`` (``HH:MM:SS`` from one hour on).

    With *precise* the seconds field carries two decimals (``MM:SS.ss``).
    The value is rounded once, before it is split into fields, so 59.99 s
    shows as ``01:00`` but ``00:59.99`` in precise mode.  An unlimited
    (infinite) duration renders as ``∞``.
    """
    if math.isinf(seconds) and seconds > 0:
        return "∞"
    precision = 2 if precise else 0
    width = 5 if precise else 2
    total = round_half_up(max(0.0, seconds), precision)
    mins = int(total) // 60
    secs = total % 60.0
    secs_text = f"{secs:0{width}.{precision}f}"
    if mins >= 60:
        return f"{mins // 60:02d}:{mins % 60:02d}:{secs_text}"
    return f"{mins:02d}:{secs_text}"


def format_debug(seconds: float) -> str:
    """Compact ``<secs>.<millis>s`` form used in log messages."""
    whole = int(seconds)
    millis = int(round((seconds - whole) * 1000))
    if millis == 1000:
        whole, millis = whole + 1, 0
    return f"{whole}.{millis:03d}s"
