import logging

from fastapi import (
    APIRouter,
    HTTPException,
    Query,
    WebSocket,
    WebSocketDisconnect,
    status,
)

from khet_mitra.core.security import decode_access_token

from .manager import manager

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/chatroom/ws/{room_id}")
async def chatroom_websocket(websocket: WebSocket, room_id: str, token: str = Query(...)):
    """Listens for messages broadcast to a chatroom. Incoming frames are ignored."""
    try:
        decode_access_token(token)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await manager.connect(websocket, room_id)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        manager.disconnect(websocket, room_id)
    except Exception:
        logger.exception("Chatroom websocket for room %s failed", room_id)
        manager.disconnect(websocket, room_id)
