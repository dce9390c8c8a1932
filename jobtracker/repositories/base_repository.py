# =============================================
# jobtracker/repositories/base_repository.py
# =============================================
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel, ValidationError as PydanticValidationError
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Type
import logging

from jobtracker.core.exceptions import DatabaseError, ValidationError
from jobtracker.core.validators import parse_document_id, utcnow
from jobtracker.schemas.common import PartialUpdate, document_fields

logger = logging.getLogger(__name__)


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged forward so it is always later than ``previous``"""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class DocumentRepository:
    """CRUD over one collection table.

    Subclasses set ``model`` (ORM class), ``create_schema`` (the schema that a
    full document must satisfy) and ``default_order`` (column name, ``-`` prefix
    for descending).
    """
    model: Type[Any]
    create_schema: Type[BaseModel]
    default_order: str
    label: str = "document"

    def __init__(self, db: AsyncSession):
        self.db = db

    # =============================================
    # HOOKS
    # =============================================

    def prepare_create(self, values: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        """Fill server-assigned values before insert"""
        values["created_at"] = now
        values["updated_at"] = now
        return values

    def order_clause(self, order_by: Optional[str] = None):
        field = order_by or self.default_order
        name = field.lstrip("-")
        if name not in self.model.__table__.columns:
            raise ValueError(f"Cannot order {self.label}s by unknown field '{name}'")
        column = getattr(self.model, name)
        return column.desc() if field.startswith("-") else column.asc()

    # =============================================
    # BASIC CRUD OPERATIONS
    # =============================================

    async def create(self, data: BaseModel) -> Any:
        """Insert a validated document"""
        values = {key: value for key, value in data.model_dump().items() if value is not None}
        document = self.model(**self.prepare_create(values, utcnow()))
        try:
            self.db.add(document)
            await self.db.commit()
            await self.db.refresh(document)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error creating {self.label}: {e}")
            raise DatabaseError(f"Error creating {self.label}", {"error": str(e)})

        logger.info(f"{self.label.capitalize()} created successfully: {document.id}")
        return document

    async def get_by_id(self, document_id: Any) -> Optional[Any]:
        """Get a document by id; malformed ids are simply not found"""
        parsed_id = parse_document_id(document_id)
        if parsed_id is None:
            logger.debug(f"Malformed {self.label} id: {document_id!r}")
            return None
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == parsed_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.label} by ID {document_id}: {e}")
            raise DatabaseError(f"Error fetching {self.label}", {"error": str(e)})

    async def get_all(self, order_by: Optional[str] = None) -> List[Any]:
        """Every document in the collection, ordered"""
        stmt = select(self.model).order_by(self.order_clause(order_by))
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error getting all {self.label}s: {e}")
            raise DatabaseError(f"Error fetching {self.label}s", {"error": str(e)})

    async def update(self, document_id: Any, changes: PartialUpdate) -> Optional[Any]:
        """Apply the supplied fields, re-validating the merged document"""
        document = await self.get_by_id(document_id)
        if document is None:
            return None

        supplied = changes.changes()
        merged = changes.merge_into(document_fields(document, self.create_schema))
        try:
            validated = self.create_schema.model_validate(merged)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

        for field in supplied:
            setattr(document, field, getattr(validated, field))
        document.updated_at = next_timestamp(document.updated_at)

        try:
            await self.db.commit()
            await self.db.refresh(document)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error updating {self.label} {document_id}: {e}")
            raise DatabaseError(f"Error updating {self.label}", {"error": str(e)})

        logger.info(f"{self.label.capitalize()} updated: {document.id} fields={sorted(supplied)}")
        return document

    async def delete(self, document_id: Any) -> bool:
        """Remove a document; related documents are left as they are"""
        document = await self.get_by_id(document_id)
        if document is None:
            return False
        try:
            await self.db.delete(document)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Error deleting {self.label} {document_id}: {e}")
            raise DatabaseError(f"Error deleting {self.label}", {"error": str(e)})

        logger.info(f"{self.label.capitalize()} deleted: {document_id}")
        return True
