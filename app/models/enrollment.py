"""Enrollment model - a user's progress in one course"""
from typing import Optional, Union

from pydantic import Field

from app.models.base import ApiModel, iso_timestamp


class Enrollment(ApiModel):
    """Progress record keyed by (user_id, course_id)"""

    user_id: str
    course_id: str
    progress: Union[int, float] = Field(default=0, ge=0, le=100)
    enrolled_at: str = Field(default_factory=iso_timestamp)
    last_updated: Optional[str] = None
