# =============================================
# jobtracker/schemas/common.py
# =============================================
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type

# Request bodies: camelCase on the wire, snake_case accepted too, unknown keys dropped
INPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=True,
    extra="ignore",
)

# Responses: read from ORM attributes or camelCase dicts, serialize as camelCase
OUTPUT_CONFIG = ConfigDict(
    from_attributes=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored datetimes are naive UTC; tag them on the way out"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def document_fields(document: Any, schema: Type[BaseModel]) -> Dict[str, Any]:
    """Current values of a stored document for the fields a schema declares"""
    return {name: getattr(document, name) for name in schema.model_fields}


# =============================================
# PARTIAL UPDATE BASE
# =============================================
class PartialUpdate(BaseModel):
    """Update payload where every field is optional.

    A field left out of the request is untouched; a field sent explicitly
    (even as null) is a change.
    """
    model_config = INPUT_CONFIG

    def changes(self) -> Dict[str, Any]:
        """Only the fields present in the input"""
        return self.model_dump(exclude_unset=True)

    def merge_into(self, current: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay the supplied fields on a document's current values"""
        merged = dict(current)
        merged.update(self.changes())
        return merged


class DeleteResponse(BaseModel):
    """Confirmation body for DELETE endpoints"""
    message: str
