"""LiveSession model - a real-time class event"""
from typing import Literal, Optional

from pydantic import Field

from app.models.base import ApiModel, iso_timestamp

SESSION_ACTIVE = "active"
SESSION_STOPPED = "stopped"


class LiveSession(ApiModel):
    """Live class with start/stop lifecycle and an attendee counter"""

    session_id: str
    title: str
    instructor: str
    tenant_id: str
    status: Literal["active", "stopped"] = SESSION_ACTIVE
    start_time: str = Field(default_factory=iso_timestamp)
    end_time: Optional[str] = None
    attendees: int = Field(default=0, ge=0)

    @property
    def is_active(self) -> bool:
        return self.status == SESSION_ACTIVE

    def __repr__(self):
        return f"<LiveSession(session_id={self.session_id}, status={self.status})>"
