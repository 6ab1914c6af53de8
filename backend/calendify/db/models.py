"""
Database Models (ORM)
---------------------
Defines the structure of the two tables the API owns.

    events         - calendar entries (title + date)
    notifications  - log of every add / edit / delete on events
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum as SQLEnum
from sqlalchemy.sql import func
import enum

from calendify.db.database import Base


# =============================================================================
# ENUMS
# =============================================================================

class NotificationType(str, enum.Enum):
    """Which kind of event mutation produced the notification"""
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"


# =============================================================================
# EVENT MODEL
# =============================================================================

class Event(Base):
    """
    A calendar entry.

    NOTE: `date` is kept as the string the client sent (ISO-8601 by
    convention). Nothing parses or checks it.
    """
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    date = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Event(id={self.id}, title={self.title}, date={self.date})>"


# =============================================================================
# NOTIFICATION MODEL
# =============================================================================

class Notification(Base):
    """
    Append-only log row written next to every event mutation.
    Never updated, never deleted by the API.
    """
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    message = Column(Text, nullable=False)

    # Store "add"/"edit"/"delete" rather than the member names
    type = Column(
        SQLEnum(
            NotificationType,
            name="notification_type",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    def __repr__(self):
        return f"<Notification(id={self.id}, type={self.type})>"
