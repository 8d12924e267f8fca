"""
Tenant Directory API Endpoints

- GET /api/tenants
- GET /api/tenant/{tenant_id}
- GET /api/tenant/{tenant_id}/courses
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import get_platform_state
from app.api.errors import NotFound
from app.state import PlatformState

router = APIRouter(prefix="/api", tags=["Tenants"])


@router.get("/tenants")
async def list_tenants(state: PlatformState = Depends(get_platform_state)):
    return {"tenants": [t.to_json() for t in state.directory.list_tenants()]}


@router.get("/tenant/{tenant_id}")
async def get_tenant(tenant_id: str, state: PlatformState = Depends(get_platform_state)):
    tenant = state.directory.get_tenant(tenant_id)
    if tenant is None:
        raise NotFound("Tenant not found")
    return tenant.to_json()


@router.get("/tenant/{tenant_id}/courses")
async def list_tenant_courses(tenant_id: str, state: PlatformState = Depends(get_platform_state)):
    """
    Courses for a tenant.

    Unknown tenants are answered with an empty list rather than a 404.
    """
    courses = [c.to_json() for c in state.directory.list_courses(tenant_id)]
    return {"tenantId": tenant_id, "courses": courses, "count": len(courses)}
