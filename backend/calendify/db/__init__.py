"""
Database Package
----------------
Exposes database models and utilities.
"""

from calendify.db.database import (
    Base, engine, SessionLocal, get_db, init_db, check_db_connection
)
from calendify.db.models import Event, Notification, NotificationType

__all__ = [
    # Database setup
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",
    "check_db_connection",

    # Models
    "Event",
    "Notification",

    # Enums
    "NotificationType",
]
