"""Timestamp helper shared by the model defaults and the repository."""
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
