"""Announcement model - broadcast messages shown on dashboards"""
from datetime import datetime
from typing import Literal

from app.models.base import ApiModel

ALL_TENANTS = "all"


class Announcement(ApiModel):
    """Static broadcast message; tenant_id is a tenant id or "all" """

    id: str
    title: str
    content: str
    date: datetime
    priority: Literal["high", "medium", "low"]
    tenant_id: str = ALL_TENANTS
