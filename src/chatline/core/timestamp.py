from datetime import datetime


def get_short_timestamp(now: datetime | None = None) -> str:
    """Return a display timestamp like ``9:05`` (hour unpadded, minutes padded)."""
    now = now or datetime.now()
    return f"{now.hour}:{now.minute:02d}"
