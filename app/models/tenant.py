"""Tenant and Course models - per-institution catalog data"""
from app.models.base import ApiModel


class Tenant(ApiModel):
    """Institution using the platform (read-only reference data)"""

    id: str
    name: str
    students: int
    courses: int
    instructors: int


class Course(ApiModel):
    """Course owned by exactly one tenant's catalog"""

    id: str
    title: str
    instructor: str
    students: int = 0
    duration: str = "12 weeks"
    description: str = ""

    def __repr__(self):
        return f"<Course(id={self.id}, title={self.title})>"
