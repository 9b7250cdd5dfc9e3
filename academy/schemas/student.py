"""
Student schemas: create/update payloads, filters and the DTO returned
across the service boundary.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field, model_validator

from academy.models.enums import StudentStatus
from academy.schemas.common.base import (
    BaseCreateSchema,
    BaseFilterSchema,
    BaseSchema,
    BaseUpdateSchema,
)

__all__ = [
    "StudentUserSummary",
    "TeacherUserSummary",
    "StudentTeacherSummary",
    "StudentCounts",
    "StudentDto",
    "StudentCreate",
    "CreateStudentRequest",
    "StudentUpdate",
    "StudentFilters",
    "StudentPage",
    "StudentStatistics",
]


class StudentUserSummary(BaseSchema):
    """Login account linked to a student."""

    id: str
    email: str
    full_name: Optional[str] = None


class TeacherUserSummary(BaseSchema):
    full_name: Optional[str] = None
    email: str


class StudentTeacherSummary(BaseSchema):
    """Assigned teacher with the teacher's account name and email."""

    id: str
    user: TeacherUserSummary


class StudentCounts(BaseSchema):
    """Number of related records per student."""

    classes: int = 0
    invoices: int = 0
    progress_logs: int = 0


class StudentDto(BaseSchema):
    """Student as returned by the service layer."""

    id: str
    full_name: str
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    age: Optional[int] = None
    status: StudentStatus
    created_at: datetime
    teacher: Optional[StudentTeacherSummary] = None
    user: Optional[StudentUserSummary] = None
    counts: Optional[StudentCounts] = None


class StudentCreate(BaseCreateSchema):
    """Data required to create a student record."""

    full_name: str = Field(..., min_length=2, max_length=255)
    age: Optional[int] = Field(default=None, gt=0)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    contact_email: Optional[EmailStr] = None
    teacher_id: str = Field(..., min_length=1)
    user_id: Optional[str] = None
    status: StudentStatus = StudentStatus.ACTIVE


class CreateStudentRequest(BaseCreateSchema):
    """
    Admin request to enrol a student, optionally with a login account.

    When ``create_login_account`` is set, ``email`` and ``password`` are
    both required; the check is made by the service so the caller gets a
    validation failure result instead of an exception.
    """

    full_name: str = Field(..., min_length=2, max_length=255)
    age: Optional[int] = Field(default=None, gt=0)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    contact_email: Optional[EmailStr] = None
    teacher_id: str = Field(..., min_length=1)
    create_login_account: bool = False
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=8)
    status: StudentStatus = StudentStatus.ACTIVE


class StudentUpdate(BaseUpdateSchema):
    """Partial update; only explicitly set fields are applied."""

    full_name: Optional[str] = Field(default=None, min_length=2, max_length=255)
    age: Optional[int] = Field(default=None, gt=0)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    status: Optional[StudentStatus] = None
    teacher_id: Optional[str] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def reject_null_required(self) -> "StudentUpdate":
        for name in ("full_name", "status", "teacher_id"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class StudentFilters(BaseFilterSchema):
    status: Optional[StudentStatus] = None
    teacher_id: Optional[str] = None
    search: Optional[str] = None


class StudentPage(BaseSchema):
    """One page of students and the total number of matches."""

    students: List[StudentDto]
    total: int = Field(..., ge=0)


class StudentStatistics(BaseSchema):
    total: int = 0
    active: int = 0
    inactive: int = 0
    trial: int = 0
    with_login_account: int = 0
