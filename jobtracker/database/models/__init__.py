# =============================================
# jobtracker/database/models/__init__.py
# =============================================
"""
Database Models Package

Imports every model so its table is registered on Base.metadata.
"""

from .application import Application
from .contact import Contact

__all__ = [
    "Application",
    "Contact",
]
