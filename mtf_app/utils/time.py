"""
Conversions between epoch-millisecond bar timestamps and UTC datetimes.

Bar timestamps from data feeds are authoritative; these helpers never
substitute wall-clock time for a missing market timestamp.
"""

from datetime import datetime, timezone


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Args:
        timestamp_ms: Epoch timestamp in milliseconds

    Returns:
        UTC datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
