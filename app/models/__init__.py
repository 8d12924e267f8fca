"""Pydantic models for the EdTech Platform in-memory data"""
from app.models.tenant import Tenant, Course
from app.models.enrollment import Enrollment
from app.models.session import LiveSession, SESSION_ACTIVE, SESSION_STOPPED
from app.models.announcement import Announcement, ALL_TENANTS

__all__ = [
    "Tenant",
    "Course",
    "Enrollment",
    "LiveSession",
    "SESSION_ACTIVE",
    "SESSION_STOPPED",
    "Announcement",
    "ALL_TENANTS",
]
