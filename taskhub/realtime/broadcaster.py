"""WebSocket fan-out of task events to connected clients."""
from __future__ import annotations

from typing import Any, Protocol

import structlog
from fastapi import WebSocket
from prometheus_client import Counter, Gauge

logger = structlog.get_logger(__name__)

CONNECTED_SESSIONS = Gauge("ws_connected_sessions", "Number of connected WebSocket sessions")
EVENTS_PUBLISHED = Counter("ws_events_published_total", "Task events published to subscribers", ["event"])


class EventPublisher(Protocol):
    async def publish(self, event: str, payload: dict[str, Any]) -> None:
        """Deliver ``payload`` under ``event`` to every current subscriber."""


class TaskBroadcaster:
    """Tracks live WebSocket sessions and pushes events to all of them.

    Delivery is fire-and-forget: a session whose send fails is dropped and
    the event is not retried or replayed.
    """

    def __init__(self) -> None:
        self._sessions: set[WebSocket] = set()

    @property
    def connection_count(self) -> int:
        return len(self._sessions)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._sessions.add(websocket)
        CONNECTED_SESSIONS.set(len(self._sessions))
        logger.info("ws.connected", client=_client_label(websocket), sessions=len(self._sessions))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket not in self._sessions:
            return
        self._sessions.discard(websocket)
        CONNECTED_SESSIONS.set(len(self._sessions))
        logger.info("ws.disconnected", client=_client_label(websocket), sessions=len(self._sessions))

    async def publish(self, event: str, payload: dict[str, Any]) -> None:
        message = {"event": event, "data": payload}
        sessions = list(self._sessions)
        logger.info("ws.publish", event_name=event, task_id=payload.get("id"), sessions=len(sessions))
        EVENTS_PUBLISHED.labels(event=event).inc()
        for websocket in sessions:
            try:
                await websocket.send_json(message)
            except Exception as exc:  # noqa: BLE001 - a broken session must not stop the fan-out
                logger.warning("ws.send_failed", client=_client_label(websocket), error=str(exc))
                self.disconnect(websocket)

    async def close(self) -> None:
        for websocket in list(self._sessions):
            try:
                await websocket.close()
            except RuntimeError as exc:
                logger.debug("ws.close_failed", client=_client_label(websocket), error=str(exc))
            self.disconnect(websocket)


def _client_label(websocket: WebSocket) -> str:
    client = websocket.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"
