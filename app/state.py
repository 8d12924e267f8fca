"""
Application state container.

Every in-memory table is owned by one PlatformState instance created by the
application factory, so each app (and each test) gets an isolated copy.
"""
from dataclasses import dataclass

from app.config import Settings
from app.services.announcements import AnnouncementFeed
from app.services.catalog import TenantDirectory
from app.services.enrollment_store import EnrollmentStore
from app.services.live_sessions import LiveSessionRegistry
from app.services.rate_limiter import FixedWindowRateLimiter
from app.services.seed_data import build_announcements, build_tenant_courses, build_tenants


@dataclass
class PlatformState:
    settings: Settings
    directory: TenantDirectory
    enrollments: EnrollmentStore
    sessions: LiveSessionRegistry
    announcements: AnnouncementFeed
    rate_limiter: FixedWindowRateLimiter


def build_platform_state(settings: Settings) -> PlatformState:
    """Create a fresh, seeded state for one application instance"""
    return PlatformState(
        settings=settings,
        directory=TenantDirectory(build_tenants(), build_tenant_courses()),
        enrollments=EnrollmentStore(),
        sessions=LiveSessionRegistry(),
        announcements=AnnouncementFeed(build_announcements()),
        rate_limiter=FixedWindowRateLimiter(
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        ),
    )
