"""
Event Service
-------------
Business logic for calendar events and their notification log.

RESPONSIBILITIES:
- List / create / update / delete events
- Write one notification row for every event mutation
- List the most recent notifications

TRANSACTIONS:
The event change and its notification are committed together. If either
statement fails nothing is committed; get_db() closes the session and the
pending work is rolled back.
"""

import logging
from typing import Optional, List, Union
from sqlalchemy.orm import Session

from calendify.config import settings
from calendify.db.models import Event, Notification, NotificationType
from calendify.models.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class InvalidInputError(ValueError):
    """A required value is missing from the request."""


class EventWriteError(ValueError):
    """The database accepted the statement but reported no result."""


class EventService:
    """
    Service for managing events.

    USAGE:
    service = EventService()
    event = service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))
    """

    def __init__(self, notifications_limit: Optional[int] = None):
        self.notifications_limit = (
            settings.NOTIFICATIONS_LIMIT if notifications_limit is None else notifications_limit
        )
        logger.info("Event service initialized")

    # -------------------------------------------------------------------------
    # READS
    # -------------------------------------------------------------------------

    def list_events(self, db: Session) -> List[Event]:
        """All events, in whatever order the database returns them."""
        return db.query(Event).all()

    def list_notifications(self, db: Session, limit: Optional[int] = None) -> List[Notification]:
        """
        Most recent notifications first.

        Rows written in the same clock tick are ordered by id, so the
        newest insert still comes first.
        """
        return db.query(Notification).order_by(
            Notification.created_at.desc(),
            Notification.id.desc()
        ).limit(self.notifications_limit if limit is None else limit).all()

    # -------------------------------------------------------------------------
    # WRITES
    # -------------------------------------------------------------------------

    def create_event(self, db: Session, data: EventCreate) -> Event:
        """
        Insert an event and its "add" notification.

        RAISES:
        EventWriteError if the insert produced no id
        """
        event = Event(title=data.title, date=data.date)
        db.add(event)
        db.flush()  # assigns event.id

        if event.id is None:
            raise EventWriteError("Failed to create event")

        self._notify(db, f"New event added: {data.title}", NotificationType.ADD)
        db.commit()
        db.refresh(event)

        logger.info(f"Event created (ID: {event.id})")
        return event

    def update_event(self, db: Session, data: EventUpdate) -> int:
        """
        Overwrite title and date of an event.

        An unknown id updates nothing and still counts as success, so the
        "edit" notification is written either way.

        RETURNS:
        Number of rows changed (0 or 1)
        """
        updated = db.query(Event).filter(Event.id == data.id).update(
            {Event.title: data.title, Event.date: data.date},
            synchronize_session=False
        )

        self._notify(db, f"Event updated: {data.title}", NotificationType.EDIT)
        db.commit()

        if updated:
            logger.info(f"Event updated (ID: {data.id})")
        else:
            logger.info(f"Update matched no event (ID: {data.id})")
        return updated

    def delete_event(self, db: Session, event_id: Union[int, str, None]) -> str:
        """
        Delete an event and write its "delete" notification.

        The title is read before the delete so the notification can name
        it. An unknown id leaves the title empty.

        RAISES:
        InvalidInputError if no id was given, or it isn't an integer

        RETURNS:
        Title of the deleted event ("" if there was none)
        """
        event_id = self._parse_id(event_id)

        event = db.query(Event).filter(Event.id == event_id).first()
        title = event.title if event else ""

        deleted = db.query(Event).filter(Event.id == event_id).delete(
            synchronize_session=False
        )

        self._notify(db, f"Event deleted: {title}", NotificationType.DELETE)
        db.commit()

        if deleted:
            logger.info(f"Event deleted (ID: {event_id})")
        else:
            logger.info(f"Delete matched no event (ID: {event_id})")
        return title

    @staticmethod
    def _parse_id(raw: Union[int, str, None]) -> int:
        # "", "0" and 0 all mean no id
        if raw in (None, ""):
            raise InvalidInputError("No ID provided")
        try:
            event_id = int(raw)
        except (TypeError, ValueError):
            raise InvalidInputError("Invalid input data")
        if not event_id:
            raise InvalidInputError("No ID provided")
        return event_id

    def _notify(self, db: Session, message: str, kind: NotificationType) -> Notification:
        """Stage a notification in the caller's transaction."""
        notification = Notification(message=message, type=kind)
        db.add(notification)
        return notification


# =============================================================================
# GLOBAL SERVICE INSTANCE
# =============================================================================
_service: Optional[EventService] = None


def get_event_service() -> EventService:
    """Get the global event service instance."""
    global _service
    if _service is None:
        _service = EventService()
    return _service
