"""Default value factories shared by the domain models."""

from datetime import UTC, datetime
from uuid import uuid4


def new_id() -> str:
    """Generate a random hex identifier."""
    return uuid4().hex


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(UTC)
