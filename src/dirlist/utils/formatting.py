# src/dirlist/utils/formatting.py
from datetime import datetime, timezone
from email.utils import format_datetime

from dirlist.config import INDENT_MARKER, SIZE_STEP, SIZE_UNITS

UTC_SUFFIX = " +0000"


def format_size(num_bytes: int) -> str:
    """Scales a byte count to the largest unit keeping the value below 1024, e.g. 1536 -> '1.5KB'."""
    if num_bytes < SIZE_STEP:
        return f"{num_bytes}B"

    value = float(num_bytes)
    unit = 0
    while value >= SIZE_STEP and unit < len(SIZE_UNITS) - 1:
        value /= SIZE_STEP
        unit += 1
    return f"{value:.1f}{SIZE_UNITS[unit]}"


def format_timestamp(moment: datetime) -> str:
    """
    Renders an instant as RFC 2822 text in UTC without the zone suffix,
    e.g. 'Mon, 19 Oct 2026 08:05:09'. Naive datetimes are taken as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return format_datetime(moment).removesuffix(UTC_SUFFIX)


def format_indent(depth: int, min_depth: int) -> str:
    return INDENT_MARKER * max(0, depth - min_depth)
