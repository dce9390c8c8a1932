# =============================================
# jobtracker/repositories/contact_repository.py
# =============================================
from jobtracker.database.models.contact import Contact
from jobtracker.schemas.contact import ContactCreate
from jobtracker.repositories.base_repository import DocumentRepository


class ContactRepository(DocumentRepository):
    model = Contact
    create_schema = ContactCreate
    default_order = "name"
    label = "contact"
