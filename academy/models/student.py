"""
Student core model.

Represents a learner enrolled with a teacher. A student may or may not
have a login account of their own (younger students are parent managed).
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.models.base import BaseModel, TimestampMixin
from academy.models.enums import StudentStatus

if TYPE_CHECKING:
    from academy.models.user import Teacher, User
    from academy.models.academics import ClassSession, ProgressLog
    from academy.models.billing import Invoice


class Student(BaseModel, TimestampMixin):
    """
    Core student model.

    Relationships:
        - Belongs to a Teacher
        - Optionally linked to a User login account
        - Has ClassSessions, ProgressLogs and Invoices
    """

    __tablename__ = "students"

    full_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    contact_email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[StudentStatus] = mapped_column(
        Enum(StudentStatus, native_enum=False, length=20),
        nullable=False,
        default=StudentStatus.ACTIVE,
        index=True,
    )

    teacher_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("teachers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        unique=True,
        nullable=True,
    )

    teacher: Mapped["Teacher"] = relationship(back_populates="students")
    user: Mapped[Optional["User"]] = relationship(back_populates="student_profile")
    classes: Mapped[List["ClassSession"]] = relationship(back_populates="student")
    progress_logs: Mapped[List["ProgressLog"]] = relationship(back_populates="student")
    invoices: Mapped[List["Invoice"]] = relationship(back_populates="student")

    @property
    def has_login_account(self) -> bool:
        return self.user_id is not None
