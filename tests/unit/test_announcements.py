"""
Unit tests for AnnouncementFeed

Tests tenant filtering and relative-time formatting tiers.
"""
from datetime import datetime, timedelta, timezone

import pytest

from app.models import Announcement
from app.services.announcements import AnnouncementFeed, format_time_ago
from app.services.seed_data import build_announcements

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestFormatTimeAgo:
    """Test the seconds / minutes / hours / days tiers"""

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=0), "0 seconds ago"),
        (timedelta(seconds=59), "59 seconds ago"),
        (timedelta(seconds=60), "1 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(hours=1), "1 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=24), "1 days ago"),
        (timedelta(days=3, hours=23), "3 days ago"),
    ])
    def test_tiers(self, delta, expected):
        assert format_time_ago(NOW - delta, NOW) == expected


class TestAnnouncementFeed:
    """Test filtering and rendering"""

    @pytest.fixture
    def feed(self):
        seeded = build_announcements(NOW)
        scoped = Announcement(
            id="9",
            title="MIT only",
            content="Campus closed",
            date=NOW - timedelta(minutes=5),
            priority="low",
            tenant_id="mit",
        )
        return AnnouncementFeed(seeded + [scoped])

    def test_no_filter_returns_everything(self, feed):
        assert len(feed.list_for(None)) == 4

    def test_all_sentinel_returns_everything(self, feed):
        assert len(feed.list_for("all")) == 4

    def test_tenant_filter_includes_global_and_own(self, feed):
        ids = [a.id for a in feed.list_for("mit")]
        assert ids == ["1", "2", "3", "9"]

    def test_tenant_filter_excludes_other_tenants(self, feed):
        ids = [a.id for a in feed.list_for("oxford")]
        assert ids == ["1", "2", "3"]

    def test_render_rewrites_dates(self, feed):
        rendered = feed.render("mit", now=NOW)

        assert [a["date"] for a in rendered] == [
            "2 hours ago", "5 hours ago", "1 days ago", "5 minutes ago",
        ]
        assert rendered[0]["tenantId"] == "all"
        assert rendered[0]["priority"] == "high"
