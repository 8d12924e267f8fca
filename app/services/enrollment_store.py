"""
Enrollment & Progress Store

Maps user_id -> course_id -> Enrollment. Both enroll() and
record_progress() are upserts: a missing record is created with progress 0.
"""
import logging
import threading
from typing import Dict, Optional, Union

from app.models import Enrollment
from app.models.base import iso_timestamp

logger = logging.getLogger(__name__)

Number = Union[int, float]

MIN_PROGRESS = 0
MAX_PROGRESS = 100


def clamp_progress(value: Number) -> Number:
    """Clamp a progress value into [0, 100] inclusive"""
    return max(MIN_PROGRESS, min(MAX_PROGRESS, value))


class EnrollmentStore:
    """In-memory enrollment table with explicit upsert semantics"""

    def __init__(self):
        self._enrollments: Dict[str, Dict[str, Enrollment]] = {}
        self._lock = threading.RLock()

    def get(self, user_id: str, course_id: str) -> Optional[Enrollment]:
        with self._lock:
            return self._enrollments.get(user_id, {}).get(course_id)

    def enroll(self, user_id: str, course_id: str) -> Enrollment:
        """Create the enrollment if absent; an existing one keeps its progress"""
        with self._lock:
            return self._upsert(user_id, course_id)

    def record_progress(self, user_id: str, course_id: str, progress: Number) -> Enrollment:
        """
        Write a progress value, creating the enrollment on first write.

        Args:
            user_id: Learner identifier
            course_id: Course identifier (not checked against any catalog)
            progress: Raw value, clamped into [0, 100]

        Returns:
            The updated enrollment
        """
        with self._lock:
            enrollment = self._upsert(user_id, course_id)
            enrollment.progress = clamp_progress(progress)
            enrollment.last_updated = iso_timestamp()
            return enrollment

    def _upsert(self, user_id: str, course_id: str) -> Enrollment:
        user_courses = self._enrollments.setdefault(user_id, {})
        enrollment = user_courses.get(course_id)
        if enrollment is None:
            enrollment = Enrollment(user_id=user_id, course_id=course_id, progress=0)
            user_courses[course_id] = enrollment
            logger.info(f"Enrolled user {user_id} in course {course_id}")
        return enrollment
