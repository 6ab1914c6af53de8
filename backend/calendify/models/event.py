"""
Event Pydantic Models
---------------------
Request/response schemas for the events resource.

VALIDATION RULES:
- Required keys must be present and non-null
- Nothing else is checked: no type checks, no length limits, no date parsing
- Scalars (numbers, booleans) for title/date are stored as strings
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional
from datetime import datetime

from calendify.db.models import NotificationType


# =============================================================================
# REQUEST BODIES
# =============================================================================

class EventCreate(BaseModel):
    """
    Body of POST /api/events.

    EXAMPLE:
    {
        "title": "Standup",
        "date": "2024-01-01"
    }
    """
    title: str = Field(..., description="What the event is")
    date: str = Field(..., description="ISO-8601 date, e.g. 2024-01-01")

    @field_validator("title", "date", mode="before")
    @classmethod
    def scalar_to_str(cls, value: Any) -> Any:
        """Turn JSON scalars into the text stored in the column. None stays missing."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class EventUpdate(EventCreate):
    """
    Body of PUT /api/events.

    EXAMPLE:
    {
        "id": 3,
        "title": "Standup (moved)",
        "date": "2024-01-02"
    }
    """
    id: int = Field(..., description="Event to overwrite")


# =============================================================================
# RESPONSES
# =============================================================================

class EventResponse(BaseModel):
    """One row of GET /api/events, and the body returned by POST."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    date: str


class NotificationResponse(BaseModel):
    """One row of GET /api/events?type=notifications."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    message: str
    type: NotificationType
    created_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    """
    Generic response message.

    RESPONSE:
    {
        "message": "Event updated successfully"
    }
    """
    message: str


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx reply."""
    error: str
