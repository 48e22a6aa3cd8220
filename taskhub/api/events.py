"""WebSocket endpoint that subscribes clients to task events."""
from fastapi import APIRouter, WebSocket

router = APIRouter()


@router.websocket("/ws")
async def task_events(websocket: WebSocket) -> None:
    broadcaster = websocket.app.state.broadcaster
    await broadcaster.connect(websocket)
    try:
        # No client events are defined; text and binary frames are discarded.
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        broadcaster.disconnect(websocket)
