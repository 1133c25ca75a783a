"""Lenient parsing of query parameters."""


def coerce_limit(raw: str | None, default: int, maximum: int) -> int:
    """
    Parse a ``limit`` query value without rejecting the request.

    Numeric input is truncated to an int ("5.7" -> 5) and capped at
    ``maximum``. Missing, non-numeric or non-positive input yields ``default``.
    """
    if raw is None:
        return default
    try:
        value = int(float(raw.strip()))
    except (ValueError, OverflowError):
        return default
    if value <= 0:
        return default
    return min(value, maximum)
