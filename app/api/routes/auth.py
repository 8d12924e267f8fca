"""
Mock Authentication Endpoint

POST /api/auth/login issues a decorative token for any email/password pair.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from app.api.errors import BadRequest
from app.api.payload import parse_body, read_body
from app.models.base import RequestModel
from app.services.mock_auth import login as mock_login

router = APIRouter(prefix="/api/auth", tags=["Auth"])


class LoginRequest(RequestModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/login")
async def login(body: Dict[str, Any] = Depends(read_body)):
    request = parse_body(LoginRequest, body)
    if not request.email or not request.password:
        raise BadRequest("Email and password are required")
    return mock_login(request.email)
