"""Announcement feed with tenant filtering and relative-time rendering"""
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.models import ALL_TENANTS, Announcement
from app.models.base import utc_now


def format_time_ago(moment: datetime, now: Optional[datetime] = None) -> str:
    """
    Render an instant as a coarse relative time.

    Each tier uses floor division: <60s seconds, <60min minutes,
    <24h hours, otherwise days. Units are always plural.
    """
    now = now or utc_now()
    seconds = math.floor((now - moment).total_seconds())
    if seconds < 60:
        return f"{seconds} seconds ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minutes ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hours ago"
    days = hours // 24
    return f"{days} days ago"


class AnnouncementFeed:
    """Static list of announcements; never mutated after construction"""

    def __init__(self, announcements: List[Announcement]):
        self._announcements = tuple(announcements)

    def list_for(self, tenant_id: Optional[str] = None) -> List[Announcement]:
        """Announcements visible to tenant_id; no filter (or "all") returns every one"""
        if not tenant_id or tenant_id == ALL_TENANTS:
            return list(self._announcements)
        return [
            a for a in self._announcements
            if a.tenant_id == tenant_id or a.tenant_id == ALL_TENANTS
        ]

    def render(self, tenant_id: Optional[str] = None, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Filtered announcements as JSON dicts with date rewritten to relative time"""
        now = now or utc_now()
        rendered = []
        for announcement in self.list_for(tenant_id):
            item = announcement.to_json()
            item["date"] = format_time_ago(announcement.date, now)
            rendered.append(item)
        return rendered
