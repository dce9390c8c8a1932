# =============================================
# jobtracker/views/listing.py
# =============================================
"""
Filter and sort rules for the list views.

Records are the decoded JSON documents returned by the API (camelCase keys).
The pipeline is always: categorical filter, then free-text search, then sort.
"""
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pyuca import Collator

from jobtracker.schemas.enums import (
    ALL_OPTION,
    DEFAULT_APPLICATION_SORT,
    DEFAULT_CONTACT_SORT,
)

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
SortKey = Callable[[Record], Any]

APPLICATION_SEARCH_FIELDS = ("company", "position", "location")
CONTACT_SEARCH_FIELDS = ("name", "company", "position", "email")

_datetime_adapter = TypeAdapter(datetime)


# =============================================
# SORT KEYS
# =============================================

def parse_date(value: Any) -> Optional[datetime]:
    """Parse an API date; missing or unparseable values give None"""
    if value in (None, ""):
        return None
    try:
        parsed = _datetime_adapter.validate_python(value)
    except PydanticValidationError:
        logger.debug(f"Unparseable date: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def date_key(field: str) -> SortKey:
    return lambda record: parse_date(record.get(field))


@lru_cache(maxsize=1)
def collator() -> Collator:
    """Shared Unicode (DUCET) collator"""
    return Collator()


def text_key(field: str) -> SortKey:
    """Unicode collation key, case-insensitive; empty values give None"""
    def key(record: Record) -> Optional[Tuple[int, ...]]:
        value = record.get(field)
        if not value:
            return None
        return collator().sort_key(str(value).casefold())
    return key


def sort_records(records: Iterable[Record], key: SortKey, descending: bool = False) -> List[Record]:
    """Stable sort; records without a value go last in either direction"""
    records = list(records)
    present = [record for record in records if key(record) is not None]
    missing = [record for record in records if key(record) is None]
    return sorted(present, key=key, reverse=descending) + missing


APPLICATION_SORTS: Dict[str, Tuple[SortKey, bool]] = {
    "dateDesc": (date_key("applicationDate"), True),
    "dateAsc": (date_key("applicationDate"), False),
    "companyAsc": (text_key("company"), False),
    "companyDesc": (text_key("company"), True),
    "statusAsc": (text_key("status"), False),
}

CONTACT_SORTS: Dict[str, Tuple[SortKey, bool]] = {
    "nameAsc": (text_key("name"), False),
    "nameDesc": (text_key("name"), True),
    "companyAsc": (text_key("company"), False),
    "companyDesc": (text_key("company"), True),
    "recentAsc": (date_key("createdAt"), True),
}


# =============================================
# FILTERS
# =============================================

def filter_by_category(records: Iterable[Record], field: str, selected: str = ALL_OPTION) -> List[Record]:
    """Exact match on a status/relationship field; "All" keeps everything"""
    if selected == ALL_OPTION:
        return list(records)
    return [record for record in records if record.get(field) == selected]


def search_records(records: Iterable[Record], term: str, fields: Sequence[str]) -> List[Record]:
    """Case-insensitive substring match against any of the given fields"""
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)

    def matches(record: Record) -> bool:
        return any(needle in str(record.get(field) or "").lower() for field in fields)

    return [record for record in records if matches(record)]


def apply_sort(records: Iterable[Record], sort_key: str, sorts: Dict[str, Tuple[SortKey, bool]]) -> List[Record]:
    if sort_key not in sorts:
        return list(records)
    key, descending = sorts[sort_key]
    return sort_records(records, key, descending)


# =============================================
# PIPELINES
# =============================================

def filter_applications(
    applications: Iterable[Record],
    search_term: str = "",
    status: str = ALL_OPTION,
    sort_key: str = DEFAULT_APPLICATION_SORT,
) -> List[Record]:
    result = filter_by_category(applications, "status", status)
    result = search_records(result, search_term, APPLICATION_SEARCH_FIELDS)
    return apply_sort(result, sort_key, APPLICATION_SORTS)


def filter_contacts(
    contacts: Iterable[Record],
    search_term: str = "",
    relationship: str = ALL_OPTION,
    sort_key: str = DEFAULT_CONTACT_SORT,
) -> List[Record]:
    result = filter_by_category(contacts, "relationship", relationship)
    result = search_records(result, search_term, CONTACT_SEARCH_FIELDS)
    return apply_sort(result, sort_key, CONTACT_SORTS)
