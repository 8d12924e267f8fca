"""
Admin Course Management Endpoints

No authorization is enforced: any caller may create, update or delete
courses.

- POST   /api/admin/courses
- PUT    /api/admin/courses/{course_id}
- DELETE /api/admin/courses/{course_id}?tenantId=
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_platform_state
from app.api.errors import BadRequest, NotFound
from app.api.payload import parse_body, read_body
from app.models.base import RequestModel
from app.state import PlatformState

router = APIRouter(prefix="/api/admin", tags=["Admin"])


class CourseRequest(RequestModel):
    """Fields accepted by course create and update"""

    title: Optional[str] = None
    instructor: Optional[str] = None
    tenant_id: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None


@router.post("/courses", status_code=status.HTTP_201_CREATED)
async def create_course(
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    request = parse_body(CourseRequest, body)
    if not request.title or not request.instructor or not request.tenant_id:
        raise BadRequest("Missing required fields: title, instructor, tenantId")

    course = state.directory.create_course(
        request.tenant_id,
        title=request.title,
        instructor=request.instructor,
        duration=request.duration,
        description=request.description,
    )
    return {"message": "Course created successfully", "course": course.to_json()}


@router.put("/courses/{course_id}")
async def update_course(
    course_id: str,
    body: Dict[str, Any] = Depends(read_body),
    state: PlatformState = Depends(get_platform_state),
):
    request = parse_body(CourseRequest, body)
    if not request.tenant_id:
        raise BadRequest("tenantId is required")

    course = state.directory.update_course(
        request.tenant_id,
        course_id,
        title=request.title,
        instructor=request.instructor,
        duration=request.duration,
        description=request.description,
    )
    if course is None:
        raise NotFound("Course not found")
    return {"message": "Course updated successfully", "course": course.to_json()}


@router.delete("/courses/{course_id}")
async def delete_course(
    course_id: str,
    tenant_id: Optional[str] = Query(None, alias="tenantId"),
    state: PlatformState = Depends(get_platform_state),
):
    if not tenant_id:
        raise BadRequest("tenantId is required")

    if not state.directory.delete_course(tenant_id, course_id):
        raise NotFound("Course not found")
    return {"message": "Course deleted successfully"}
