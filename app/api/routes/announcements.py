"""
Announcements & Platform Stats Endpoints

- GET /api/announcements?tenantId=
- GET /api/stats
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_platform_state
from app.state import PlatformState

router = APIRouter(prefix="/api", tags=["Announcements"])


@router.get("/announcements")
async def list_announcements(
    tenant_id: Optional[str] = Query(None, alias="tenantId"),
    state: PlatformState = Depends(get_platform_state),
):
    """Announcements for a tenant (plus global ones), dates as relative time"""
    return state.announcements.render(tenant_id)


@router.get("/stats")
async def platform_stats(state: PlatformState = Depends(get_platform_state)):
    """
    Platform-wide counters.

    totalStudents sums the tenant-level student figures and does not look
    at enrollment data.
    """
    return {
        "totalTenants": len(state.directory.list_tenants()),
        "totalCourses": state.directory.total_courses(),
        "totalStudents": state.directory.total_students(),
        "activeLiveSessions": state.sessions.count_active(),
    }
