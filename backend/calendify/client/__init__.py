"""
Client Package
--------------
Async wrapper for calling the events API.

USAGE:
from calendify.client import get_event_client

client = get_event_client()
events = await client.get_events()
"""

from calendify.client.events_client import EventServiceClient, get_event_client

__all__ = [
    "EventServiceClient",
    "get_event_client",
]
