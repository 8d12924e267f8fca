"""
Live Session API Endpoints

- POST /api/live/start
- POST /api/live/stop
- POST /api/live/join
- POST /api/live/reminder
- GET  /api/live/sessions
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_platform_state
from app.api.errors import BadRequest, NotFound
from app.api.payload import parse_body, read_body
from app.models.base import RequestModel
from app.services.live_sessions import SessionNotActive, SessionNotFound
from app.state import PlatformState

router = APIRouter(prefix="/api/live", tags=["Live Sessions"])


class StartSessionRequest(RequestModel):
    session_id: Optional[str] = None
    title: Optional[str] = None
    instructor: Optional[str] = None
    tenant_id: Optional[str] = None


class SessionRequest(RequestModel):
    session_id: Optional[str] = None
    user_id: Optional[str] = None


@router.post("/start", status_code=status.HTTP_201_CREATED)
async def start_session(
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    """Start a session; an existing session with the same id is replaced"""
    request = parse_body(StartSessionRequest, body)
    if not (request.session_id and request.title and request.instructor and request.tenant_id):
        raise BadRequest("Missing required fields: sessionId, title, instructor, tenantId")

    session = state.sessions.start(
        request.session_id, request.title, request.instructor, request.tenant_id
    )
    return {"message": "Live session started successfully", "session": session.to_json()}


@router.post("/stop")
async def stop_session(
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    request = parse_body(SessionRequest, body)
    if not request.session_id:
        raise BadRequest("Missing required field: sessionId")

    session = state.sessions.stop(request.session_id)
    if session is None:
        raise NotFound("Session not found")
    return {"message": "Live session stopped successfully", "session": session.to_json()}


@router.post("/join")
async def join_session(
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    request = parse_body(SessionRequest, body)
    if not request.session_id or not request.user_id:
        raise BadRequest("sessionId and userId are required")

    try:
        session = state.sessions.join(request.session_id)
    except SessionNotFound:
        raise NotFound("Session not found")
    except SessionNotActive:
        raise BadRequest("Session is not active")

    return {"message": "Joined session successfully", "session": session.to_json()}


@router.post("/reminder")
async def set_reminder(body: Dict[str, Any] = Depends(read_body)):
    """Acknowledge a reminder request; nothing is stored"""
    request = parse_body(SessionRequest, body)
    if not request.session_id or not request.user_id:
        raise BadRequest("sessionId and userId are required")
    return {"message": "Reminder set successfully", "sessionId": request.session_id}


@router.get("/sessions")
async def list_sessions(state: PlatformState = Depends(get_platform_state)):
    sessions = state.sessions.list_all()
    return {
        "activeSessions": [s.to_json() for s in sessions if s.is_active],
        "allSessions": [s.to_json() for s in sessions],
    }
