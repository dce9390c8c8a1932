# =============================================
# jobtracker/repositories/application_repository.py
# =============================================
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime
from typing import Any, Dict, List
import logging

from jobtracker.database.models.application import Application
from jobtracker.schemas.application import ApplicationCreate
from jobtracker.core.exceptions import DatabaseError
from jobtracker.core.validators import parse_document_id
from jobtracker.repositories.base_repository import DocumentRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(DocumentRepository):
    model = Application
    create_schema = ApplicationCreate
    default_order = "-application_date"
    label = "application"

    def prepare_create(self, values: Dict[str, Any], now: datetime) -> Dict[str, Any]:
        values.setdefault("application_date", now)
        return super().prepare_create(values, now)

    # =============================================
    # SPECIFIC QUERIES
    # =============================================

    async def get_by_contact(self, contact_id: Any) -> List[Application]:
        """Applications whose contact_id points at the given contact"""
        parsed_id = parse_document_id(contact_id)
        if parsed_id is None:
            return []
        stmt = (
            select(Application)
            .where(Application.contact_id == parsed_id)
            .order_by(self.order_clause())
        )
        try:
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error getting applications for contact {contact_id}: {e}")
            raise DatabaseError("Error fetching applications", {"error": str(e)})
