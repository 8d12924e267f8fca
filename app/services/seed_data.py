"""
Seed data for the in-memory platform tables.

Builders return fresh objects on every call so that each application
instance (and each test) starts from an unshared copy.
"""
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from app.models import Announcement, Course, Tenant
from app.models.base import utc_now

DEFAULT_TENANT_ID = "stanford"

TENANT_ROWS = [
    ("stanford", "Stanford University", 2156, 12, 24),
    ("mit", "Massachusetts Institute of Technology", 3200, 15, 32),
    ("oxford", "University of Oxford", 1890, 10, 18),
    ("berkeley", "UC Berkeley", 2800, 14, 28),
]

# tenant_id -> [(title, instructor, students, duration, description)]
COURSE_ROWS = {
    "stanford": [
        ("Introduction to Computer Science", "Prof. David Williams", 1250, "12 weeks",
         "Learn the fundamentals of computer science"),
        ("Advanced Algorithms", "Prof. Sarah Chen", 890, "10 weeks",
         "Deep dive into algorithm design and analysis"),
        ("Database Systems", "Prof. Michael Brown", 650, "8 weeks",
         "Comprehensive database design and management"),
    ],
    "mit": [
        ("MIT Introduction to Machine Learning", "Dr. John Smith", 2100, "14 weeks",
         "Introduction to ML concepts and applications"),
        ("Robotics Fundamentals", "Dr. Emily Johnson", 1560, "12 weeks",
         "Build and program robots"),
        ("Quantum Computing", "Dr. Robert Chen", 980, "10 weeks",
         "Quantum algorithms and computing principles"),
    ],
    "oxford": [
        ("Classical Literature", "Prof. James Wilson", 980, "8 weeks",
         "Study of classical literary works"),
        ("Modern Philosophy", "Dr. Mary Brown", 750, "10 weeks",
         "Contemporary philosophical thought"),
        ("Medieval History", "Prof. Elizabeth Taylor", 620, "12 weeks",
         "European history from 500-1500 AD"),
    ],
    "berkeley": [
        ("Data Science Fundamentals", "Prof. Robert Lee", 3200, "12 weeks",
         "Data analysis and visualization techniques"),
        ("Cloud Computing", "Dr. Lisa Anderson", 1890, "10 weeks",
         "AWS, Azure, and GCP cloud services"),
        ("Software Engineering", "Prof. David Kim", 1450, "14 weeks",
         "Best practices in software development"),
    ],
}

# (title, content, hours_ago, priority)
ANNOUNCEMENT_ROWS = [
    ("Mid-term Exams Schedule Released",
     "Check your dashboard for exam dates and timings. All exams will be conducted online.",
     2, "high"),
    ("New Course Materials Available",
     "Week 5 materials for all courses are now accessible in your course dashboard.",
     5, "medium"),
    ("Live Session Recording Available",
     "Recordings from last week's live sessions are now available for review.",
     24, "low"),
]


def build_tenants() -> List[Tenant]:
    return [
        Tenant(id=tid, name=name, students=students, courses=courses, instructors=instructors)
        for tid, name, students, courses, instructors in TENANT_ROWS
    ]


def build_tenant_courses() -> Dict[str, List[Course]]:
    catalog = {}
    for tenant_id, rows in COURSE_ROWS.items():
        catalog[tenant_id] = [
            Course(
                id=str(index),
                title=title,
                instructor=instructor,
                students=students,
                duration=duration,
                description=description,
            )
            for index, (title, instructor, students, duration, description) in enumerate(rows, start=1)
        ]
    return catalog


def build_announcements(now: Optional[datetime] = None) -> List[Announcement]:
    """Announcements dated relative to `now` (process start by default)"""
    now = now or utc_now()
    return [
        Announcement(
            id=str(index),
            title=title,
            content=content,
            date=now - timedelta(hours=hours_ago),
            priority=priority,
            tenant_id="all",
        )
        for index, (title, content, hours_ago, priority) in enumerate(ANNOUNCEMENT_ROWS, start=1)
    ]
