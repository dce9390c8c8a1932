# jobtracker/core/validators.py
import re
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$", re.ASCII)


def clean_required_text(value: Optional[str], label: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{label} is required")
    return value.strip()


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """Trim; blank strings become None"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_email(value: Optional[str]) -> Optional[str]:
    value = clean_optional_text(value)
    if value is None:
        return None
    value = value.lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please provide a valid email address")
    return value


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Store datetimes as naive UTC"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_document_id(value: Any) -> Optional[UUID]:
    """Parse a document id; anything that isn't a UUID yields None"""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None
