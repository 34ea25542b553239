"""Human-readable formatting of sizes and durations.

Values are rounded to two decimals before the unit is chosen, so a value that
rounds up to 1000 of one unit is shown as 1 of the next one.
"""

from humanfriendly import disk_size_units, round_number


def format_size(num_bytes: int) -> str:
    """Format a byte count using decimal (base-1000) units.

    Args:
        num_bytes: Number of bytes.

    Returns:
        ``"<n> B"`` below one kilobyte, otherwise a value such as ``"1.2 MB"``.

    Example:
        >>> format_size(5)
        '5 B'
        >>> format_size(1200000)
        '1.2 MB'
        >>> format_size(999999)
        '1 MB'
    """
    if num_bytes < 1000:
        return f"{num_bytes} B"

    for unit in disk_size_units:
        decimal = unit.decimal
        scaled = round(num_bytes / decimal.divider, 2)
        if scaled < 1000 or unit is disk_size_units[-1]:
            break
    return f"{round_number(scaled)} {decimal.symbol}"


def format_duration(seconds: float) -> str:
    """Format an elapsed wall-clock time in µs, ms or s depending on magnitude.

    Example:
        >>> format_duration(0.000250)
        '250 µs'
        >>> format_duration(0.0123456)
        '12.35 ms'
        >>> format_duration(0.9999996)
        '1 s'
        >>> format_duration(2.5)
        '2.5 s'
    """
    microseconds = round(seconds * 1_000_000, 2)
    if microseconds < 1000:
        return f"{round_number(microseconds)} µs"
    milliseconds = round(seconds * 1000, 2)
    if milliseconds < 1000:
        return f"{round_number(milliseconds)} ms"
    return f"{round_number(seconds)} s"
