# =============================================
# jobtracker/database/models/application.py
# =============================================
from sqlalchemy import Column, String, Text, DateTime, Uuid
from jobtracker.config.database import Base
from jobtracker.core.validators import utcnow
from jobtracker.schemas.enums import ApplicationStatus, max_value_length
import uuid


class Application(Base):
    __tablename__ = "applications"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    # Basic Info
    company = Column(String(255), nullable=False, index=True)
    position = Column(String(255), nullable=False)
    job_description = Column(Text, nullable=True)
    job_link = Column(String(2048), nullable=True)
    location = Column(String(255), nullable=True)
    salary = Column(String(255), nullable=True)

    # Tracking
    application_date = Column(DateTime, nullable=False, default=utcnow, index=True)
    status = Column(
        String(max_value_length(ApplicationStatus)),
        nullable=False,
        default=ApplicationStatus.BOOKMARKED.value,
        index=True
    )
    next_steps = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    # Weak reference to contacts.id (no foreign key, no cascade)
    contact_id = Column(Uuid(as_uuid=True), nullable=True, index=True)

    # Audit Fields
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f"<Application(id={self.id}, company='{self.company}', position='{self.position}', status='{self.status}')>"
