# =============================================
# jobtracker/database/models/contact.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, Uuid
from jobtracker.config.database import Base
from jobtracker.core.validators import utcnow
from jobtracker.schemas.enums import ContactRelationship, max_value_length
import uuid


class Contact(Base):
    __tablename__ = "contacts"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Basic Info
    name = Column(String(255), nullable=False, index=True)
    company = Column(String(255), nullable=True)
    position = Column(String(255), nullable=True)

    # Contact Details
    email = Column(String(320), nullable=True)
    phone = Column(String(64), nullable=True)
    linked_in = Column(String(2048), nullable=True)

    relationship = Column(
        String(max_value_length(ContactRelationship)),
        nullable=False,
        default=ContactRelationship.OTHER.value
    )
    notes = Column(Text, nullable=True)
    last_contact_date = Column(DateTime, nullable=True)

    # Audit Fields
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Contact(id={self.id}, name='{self.name}', relationship='{self.relationship}')>"
