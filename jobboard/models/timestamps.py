from datetime import datetime, timezone


def utcnow():
    """Naive UTC now; every timestamp column stores UTC without tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_iso(value):
    """Render a stored timestamp the way browsers emit ``Date.toISOString()``."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"
