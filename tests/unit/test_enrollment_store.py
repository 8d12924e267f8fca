"""
Unit tests for EnrollmentStore

Tests upsert semantics and progress clamping.
"""
import pytest

from app.services.enrollment_store import EnrollmentStore, clamp_progress


class TestClampProgress:
    """Test progress bounds"""

    @pytest.mark.parametrize("raw,expected", [
        (150, 100),
        (-10, 0),
        (0, 0),
        (100, 100),
        (55, 55),
        (42.5, 42.5),
    ])
    def test_clamp(self, raw, expected):
        assert clamp_progress(raw) == expected


class TestEnrollmentStore:
    """Test enroll / get / record_progress"""

    def test_get_unknown_returns_none(self):
        store = EnrollmentStore()
        assert store.get("u1", "1") is None

    def test_enroll_creates_record_with_zero_progress(self):
        store = EnrollmentStore()
        enrollment = store.enroll("u1", "1")

        assert enrollment.progress == 0
        assert enrollment.enrolled_at.endswith("Z")
        assert enrollment.last_updated is None
        assert store.get("u1", "1") is enrollment

    def test_repeat_enroll_keeps_progress(self):
        store = EnrollmentStore()
        store.enroll("u1", "1")
        store.record_progress("u1", "1", 60)

        again = store.enroll("u1", "1")
        assert again.progress == 60

    def test_record_progress_creates_enrollment(self):
        store = EnrollmentStore()
        enrollment = store.record_progress("u2", "3", 55)

        assert enrollment.progress == 55
        assert enrollment.last_updated is not None
        assert store.get("u2", "3") is enrollment

    def test_record_progress_clamps(self):
        store = EnrollmentStore()
        assert store.record_progress("u1", "1", 150).progress == 100
        assert store.record_progress("u1", "1", -10).progress == 0

    def test_enrollments_are_per_user_and_course(self):
        store = EnrollmentStore()
        store.record_progress("u1", "1", 30)

        assert store.get("u1", "2") is None
        assert store.get("u2", "1") is None
