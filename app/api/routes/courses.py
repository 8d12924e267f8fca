"""
Enrollment & Progress API Endpoints

- POST /api/courses/enroll
- GET  /api/courses/{course_id}/progress?userId=
- POST /api/courses/{course_id}/progress
"""
from typing import Any, Dict, Optional, Union

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_platform_state
from app.api.errors import BadRequest, NotFound
from app.api.payload import parse_body, read_body
from app.models.base import RequestModel
from app.state import PlatformState

router = APIRouter(prefix="/api/courses", tags=["Courses"])


class EnrollRequest(RequestModel):
    user_id: Optional[str] = None
    course_id: Optional[str] = None
    tenant_id: Optional[str] = None


class ProgressUpdateRequest(RequestModel):
    user_id: Optional[str] = None
    progress: Optional[Union[int, float]] = None


@router.post("/enroll")
async def enroll(
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    """
    Enroll a user in a tenant's course.

    Repeat enrollments are no-ops and keep the recorded progress.
    """
    request = parse_body(EnrollRequest, body)
    if not request.user_id or not request.course_id or not request.tenant_id:
        raise BadRequest("Missing required fields")

    course = state.directory.find_course(request.tenant_id, request.course_id)
    if course is None:
        raise NotFound("Course not found")

    enrollment = state.enrollments.enroll(request.user_id, request.course_id)
    return {
        "message": "Enrolled successfully",
        "course": course.to_json(),
        "progress": enrollment.progress,
    }


@router.get("/{course_id}/progress")
async def get_progress(
    course_id: str,
    user_id: Optional[str] = Query(None, alias="userId"),
    state: PlatformState = Depends(get_platform_state),
):
    if not user_id:
        raise BadRequest("userId is required")

    enrollment = state.enrollments.get(user_id, course_id)
    if enrollment is None:
        return {"progress": 0, "enrolled": False}
    return {"progress": enrollment.progress, "enrolled": True}


@router.post("/{course_id}/progress")
async def update_progress(
    course_id: str,
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    """
    Record progress, enrolling the user implicitly on first write.

    progress is required by presence: 0 is a valid value, and an explicit
    null is stored as 0. The value is clamped into [0, 100].
    """
    request = parse_body(ProgressUpdateRequest, body)
    if not request.user_id or "progress" not in request.model_fields_set:
        raise BadRequest("userId and progress are required")

    progress = request.progress if request.progress is not None else 0
    enrollment = state.enrollments.record_progress(request.user_id, course_id, progress)
    return {"message": "Progress updated", "progress": enrollment.progress}
