"""Wire timestamp formatting."""

from datetime import datetime, timedelta, timezone

# Upstream always reports Moscow time, whatever zone the emulator runs in.
WIRE_OFFSET = timezone(timedelta(hours=3))


def format_datetime(value: datetime | None) -> str | None:
    """Render a naive local timestamp as ``YYYY-MM-DDThh:mm:ss+03:00``.

    The offset is attached to the wall-clock value as-is; the time is not
    converted between zones.
    """
    if value is None:
        return None
    return value.replace(tzinfo=WIRE_OFFSET).isoformat(timespec="seconds")
