from typing import Any, Dict, List

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from schedcore import SchedulerError
from schedcore.events import Event

from ..serializers import serialize_event
from ..session import get_state, init_session, reset_session, run_all_session, run_session, set_config

router = APIRouter()


async def _send_state(ws: WebSocket) -> None:
    await ws.send_json({"type": "state", "data": get_state()})


@router.websocket("/ws/run")
async def ws_run(websocket: WebSocket) -> None:
    """Runs are computed synchronously, then their events are streamed one message each."""
    await websocket.accept()
    await _send_state(websocket)

    try:
        while True:
            msg: Dict[str, Any] = await websocket.receive_json()
            mtype = str(msg.get("type", "")).lower()
            events: List[Event] = []

            try:
                if mtype == "init":
                    payload = dict(msg)
                    payload.pop("type", None)
                    init_session(payload)
                elif mtype == "config":
                    set_config(msg)
                elif mtype == "run":
                    if msg.get("algorithm"):
                        run_session(msg["algorithm"], listener=events.append)
                    else:
                        run_all_session(listener=events.append)
                elif mtype == "reset":
                    reset_session()
                else:
                    await websocket.send_json({"type": "error", "detail": f"unknown message type {mtype!r}"})
                    continue
            except SchedulerError as exc:
                await websocket.send_json({"type": "error", "detail": str(exc)})
                continue

            for event in events:
                await websocket.send_json({"type": "event", "data": serialize_event(event)})
            await _send_state(websocket)
    except WebSocketDisconnect:
        return
