"""
Database & Service Tests
------------------------
Exercise EventService directly against an in-memory database.

USAGE:
    cd backend
    pytest test_database.py
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import inspect

from calendify.db import Event, Notification, NotificationType
from calendify.models.event import EventCreate, EventUpdate
from calendify.services.event_service import (
    EventService, InvalidInputError, get_event_service
)


@pytest.fixture
def service():
    return EventService(notifications_limit=10)


def test_tables(db_engine):
    """Both tables exist with the expected columns"""
    inspector = inspect(db_engine)
    assert set(inspector.get_table_names()) >= {"events", "notifications"}

    event_columns = {c["name"] for c in inspector.get_columns("events")}
    assert event_columns == {"id", "title", "date"}

    notification_columns = {c["name"] for c in inspector.get_columns("notifications")}
    assert notification_columns == {"id", "message", "type", "created_at"}


def test_create_event_writes_notification(db, service):
    event = service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))

    assert event.id is not None
    assert db.query(Event).count() == 1

    notifications = db.query(Notification).all()
    assert len(notifications) == 1
    assert notifications[0].type == NotificationType.ADD
    assert notifications[0].message == "New event added: Standup"
    assert notifications[0].created_at is not None


def test_update_event(db, service):
    event = service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))

    updated = service.update_event(
        db, EventUpdate(id=event.id, title="Retro", date="2024-01-05")
    )

    assert updated == 1
    db.expire_all()
    stored = db.query(Event).filter(Event.id == event.id).one()
    assert (stored.title, stored.date) == ("Retro", "2024-01-05")

    latest = service.list_notifications(db)[0]
    assert latest.type == NotificationType.EDIT
    assert latest.message == "Event updated: Retro"


def test_update_unknown_event_is_noop(db, service):
    updated = service.update_event(db, EventUpdate(id=999, title="Ghost", date="2024-01-01"))

    assert updated == 0
    assert db.query(Event).count() == 0
    assert db.query(Notification).filter(
        Notification.type == NotificationType.EDIT
    ).count() == 1


def test_delete_event_names_title(db, service):
    event = service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))

    title = service.delete_event(db, event.id)

    assert title == "Standup"
    assert db.query(Event).count() == 0
    latest = service.list_notifications(db)[0]
    assert latest.type == NotificationType.DELETE
    assert latest.message == "Event deleted: Standup"


def test_delete_unknown_event_has_empty_title(db, service):
    service.create_event(db, EventCreate(title="Keep me", date="2024-01-01"))

    title = service.delete_event(db, 12345)

    assert title == ""
    assert db.query(Event).count() == 1
    assert service.list_notifications(db)[0].message == "Event deleted: "


@pytest.mark.parametrize("event_id", [None, "", 0, "0"])
def test_delete_requires_id(db, service, event_id):
    with pytest.raises(InvalidInputError, match="No ID provided"):
        service.delete_event(db, event_id)

    assert db.query(Notification).count() == 0


def test_delete_rejects_non_numeric_id(db, service):
    with pytest.raises(InvalidInputError, match="Invalid input data"):
        service.delete_event(db, "abc")


def test_delete_accepts_numeric_string(db, service):
    event = service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))

    assert service.delete_event(db, str(event.id)) == "Standup"


def test_list_notifications_newest_first_and_limited(db, service):
    for i in range(12):
        service.create_event(db, EventCreate(title=f"Event {i}", date="2024-01-01"))

    notifications = service.list_notifications(db)

    assert len(notifications) == 10
    assert notifications[0].message == "New event added: Event 11"
    assert notifications[-1].message == "New event added: Event 2"
    ids = [n.id for n in notifications]
    assert ids == sorted(ids, reverse=True)


def test_list_notifications_custom_limit(db, service):
    for i in range(3):
        service.create_event(db, EventCreate(title=f"Event {i}", date="2024-01-01"))

    assert len(service.list_notifications(db, limit=2)) == 2


def test_numbers_are_stored_as_strings(db, service):
    event = service.create_event(db, EventCreate(title=42, date=20240101))

    assert event.title == "42"
    assert event.date == "20240101"


def test_booleans_are_stored_as_strings(db, service):
    event = service.create_event(db, EventCreate(title=True, date=False))

    assert event.title == "true"
    assert event.date == "false"
    assert service.list_notifications(db)[0].message == "New event added: true"


@pytest.mark.parametrize("payload", [
    {"title": None, "date": "2024-01-01"},
    {"title": "Standup"},
])
def test_null_or_absent_field_is_missing(payload):
    with pytest.raises(ValidationError):
        EventCreate(**payload)


def test_zero_limit_returns_nothing(db, service):
    service.create_event(db, EventCreate(title="Standup", date="2024-01-01"))

    assert service.list_notifications(db, limit=0) == []
    assert EventService(notifications_limit=0).list_notifications(db) == []


def test_global_service_is_shared():
    assert get_event_service() is get_event_service()
