"""
Student services.

- StudentService:
    Lookups, filtered listing, enrolment with optional login account,
    updates, delete cascade, bulk operations and statistics.
"""

from .student_service import StudentService, create_student_service

__all__ = [
    "StudentService",
    "create_student_service",
]
