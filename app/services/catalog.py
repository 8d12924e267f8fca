"""
Tenant & Course Directory

Holds the read-only tenant table and the mutable per-tenant course lists.
Admin course mutations perform no authorization check.
"""
import logging
import threading
from typing import Dict, List, Optional

from app.models import Course, Tenant

logger = logging.getLogger(__name__)


class TenantDirectory:
    """
    In-memory tenant directory and course catalog.

    Course ids are assigned as str(len(tenant_courses) + 1). After a delete
    this can hand out an id that is still in use; lookups then match the
    first course with that id.
    """

    def __init__(self, tenants: List[Tenant], tenant_courses: Dict[str, List[Course]]):
        self._tenants = list(tenants)
        self._courses = {tenant_id: list(courses) for tenant_id, courses in tenant_courses.items()}
        self._lock = threading.RLock()

    # Tenants

    def list_tenants(self) -> List[Tenant]:
        return list(self._tenants)

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        return next((t for t in self._tenants if t.id == tenant_id), None)

    def total_students(self) -> int:
        """Sum of tenant-level student counts (independent of enrollments)"""
        return sum(t.students for t in self._tenants)

    # Courses

    def list_courses(self, tenant_id: str) -> List[Course]:
        """Courses of a tenant; unknown tenants simply have none"""
        with self._lock:
            return list(self._courses.get(tenant_id, []))

    def total_courses(self) -> int:
        with self._lock:
            return sum(len(courses) for courses in self._courses.values())

    def find_course(self, tenant_id: str, course_id: str) -> Optional[Course]:
        with self._lock:
            index = self._index_of(tenant_id, course_id)
            return None if index is None else self._courses[tenant_id][index]

    def create_course(
        self,
        tenant_id: str,
        title: str,
        instructor: str,
        duration: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Course:
        """
        Append a new course to the tenant's list.

        The list is created if the tenant has none yet, so any tenant id is
        accepted here.
        """
        with self._lock:
            courses = self._courses.setdefault(tenant_id, [])
            course = Course(
                id=str(len(courses) + 1),
                title=title,
                instructor=instructor,
                students=0,
                duration=duration or "12 weeks",
                description=description or "",
            )
            courses.append(course)

        logger.info(f"Created course {course.id} ({course.title}) for tenant {tenant_id}")
        return course

    def update_course(
        self,
        tenant_id: str,
        course_id: str,
        title: Optional[str] = None,
        instructor: Optional[str] = None,
        duration: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Optional[Course]:
        """
        Update a course in place.

        title, instructor and duration only overwrite when truthy;
        description overwrites whenever it is not None (including "").
        Returns None if the course does not exist.
        """
        with self._lock:
            index = self._index_of(tenant_id, course_id)
            if index is None:
                return None

            course = self._courses[tenant_id][index]
            if title:
                course.title = title
            if instructor:
                course.instructor = instructor
            if duration:
                course.duration = duration
            if description is not None:
                course.description = description

        logger.info(f"Updated course {course_id} for tenant {tenant_id}")
        return course

    def delete_course(self, tenant_id: str, course_id: str) -> bool:
        """Remove the first course matching course_id; False if none"""
        with self._lock:
            index = self._index_of(tenant_id, course_id)
            if index is None:
                return False
            del self._courses[tenant_id][index]

        logger.info(f"Deleted course {course_id} from tenant {tenant_id}")
        return True

    def _index_of(self, tenant_id: str, course_id: str) -> Optional[int]:
        for index, course in enumerate(self._courses.get(tenant_id, [])):
            if course.id == course_id:
                return index
        return None
