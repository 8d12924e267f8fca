"""FastAPI dependencies shared by the routers"""
from fastapi import Request

from app.state import PlatformState


def get_platform_state(request: Request) -> PlatformState:
    """The PlatformState owned by the running application"""
    return request.app.state.platform
