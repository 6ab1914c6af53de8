"""
Events API Client
-----------------
Thin async wrapper around the events endpoint.

WHAT THIS DOES:
- One method per operation, one HTTP call per method
- Returns the parsed JSON body, whatever the status code
- No retries, no caching, no client-side validation

Error replies look like {"error": "..."}; callers check for that key.

USAGE:
client = get_event_client()
events = await client.get_events()
created = await client.create_event({"title": "Standup", "date": "2024-01-01"})
"""

from typing import Any, Dict, List, Optional, Union
import logging
import httpx

from calendify.config import settings

logger = logging.getLogger(__name__)

JSON = Union[Dict[str, Any], List[Any]]


class EventServiceClient:
    """
    Client for /events.

    ARGS:
    - base_url: API root (default: settings.API_BASE_URL)
    - transport: optional httpx transport, e.g. httpx.ASGITransport(app=app)
      to call an in-process app
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip('/')
        self.events_url = f"{self.base_url}/events"
        self.transport = transport

        logger.debug(f"Events client initialized: {self.events_url}")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    async def get_events(self) -> JSON:
        """GET /events -> list of {id, title, date}"""
        async with self._client() as client:
            response = await client.get(self.events_url)
        return response.json()

    async def get_notifications(self) -> JSON:
        """GET /events?type=notifications -> latest notifications"""
        async with self._client() as client:
            response = await client.get(self.events_url, params={"type": "notifications"})
        return response.json()

    async def create_event(self, event: Dict[str, Any]) -> JSON:
        """POST /events -> {id, title, date}"""
        async with self._client() as client:
            response = await client.post(self.events_url, json=event)
        return response.json()

    async def update_event(self, event: Dict[str, Any]) -> JSON:
        """PUT /events, `event` must carry its id"""
        async with self._client() as client:
            response = await client.put(self.events_url, json=event)
        return response.json()

    async def delete_event(self, event_id: Any) -> JSON:
        """DELETE /events?id=..."""
        async with self._client() as client:
            response = await client.delete(self.events_url, params={"id": event_id})
        return response.json()


# =============================================================================
# GLOBAL CLIENT INSTANCE
# =============================================================================
_client: Optional[EventServiceClient] = None


def get_event_client() -> EventServiceClient:
    """Get the shared events client, pointed at settings.API_BASE_URL."""
    global _client
    if _client is None:
        _client = EventServiceClient()
    return _client
