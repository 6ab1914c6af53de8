"""
Event API Routes
----------------
One resource, dispatched on the HTTP method.

ENDPOINTS:
- GET    /api/events                      - List all events
- GET    /api/events?type=notifications   - Latest notifications (newest first)
- POST   /api/events                      - Create event
- PUT    /api/events                      - Update event
- DELETE /api/events?id=3                 - Delete event

Anything else on this path is answered with 400 by the handlers in main.py.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from calendify.db.database import get_db
from calendify.models.event import (
    EventCreate,
    EventUpdate,
    EventResponse,
    NotificationResponse,
    MessageResponse,
    ErrorResponse
)
from calendify.services.event_service import get_event_service

# Create router
router = APIRouter()

# Get service
event_service = get_event_service()

# Every error reply is {"error": "..."}
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing input or unsupported method"},
    500: {"model": ErrorResponse, "description": "Database error occurred"},
}


# =============================================================================
# LIST EVENTS / NOTIFICATIONS
# =============================================================================

@router.get("/events", responses=ERROR_RESPONSES)
async def list_events(
    type: Optional[str] = Query(None, description="'notifications' to read the log instead"),
    db: Session = Depends(get_db)
):
    """
    List events, or the notification log.

    EXAMPLE:
    ```bash
    curl "http://localhost:8000/api/events"
    curl "http://localhost:8000/api/events?type=notifications"
    ```
    """
    if type == "notifications":
        notifications = event_service.list_notifications(db)
        return [NotificationResponse.model_validate(n) for n in notifications]

    events = event_service.list_events(db)
    return [EventResponse.model_validate(e) for e in events]


# =============================================================================
# CREATE EVENT
# =============================================================================

@router.post("/events", response_model=EventResponse, responses=ERROR_RESPONSES)
async def create_event(
    event: EventCreate,
    db: Session = Depends(get_db)
):
    """
    Create an event and log an "add" notification.

    REQUEST BODY:
    ```json
    {"title": "Standup", "date": "2024-01-01"}
    ```

    EXAMPLE:
    ```bash
    curl -X POST "http://localhost:8000/api/events" \
      -H "Content-Type: application/json" \
      -d '{"title": "Standup", "date": "2024-01-01"}'
    ```
    """
    try:
        created = event_service.create_event(db, event)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return EventResponse(id=created.id, title=event.title, date=event.date)


# =============================================================================
# UPDATE EVENT
# =============================================================================

@router.put("/events", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def update_event(
    event: EventUpdate,
    db: Session = Depends(get_db)
):
    """
    Overwrite an event's title and date.

    An id that matches nothing is not an error.

    REQUEST BODY:
    ```json
    {"id": 1, "title": "Standup", "date": "2024-01-02"}
    ```
    """
    try:
        event_service.update_event(db, event)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return MessageResponse(message="Event updated successfully")


# =============================================================================
# DELETE EVENT
# =============================================================================

@router.delete("/events", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_event(
    event_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db)
):
    """
    Delete an event by id.

    EXAMPLE:
    ```bash
    curl -X DELETE "http://localhost:8000/api/events?id=1"
    ```
    """
    try:
        event_service.delete_event(db, event_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return MessageResponse(message="Event deleted successfully")
