"""
Teaching activity models: scheduled classes and progress logs.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.models.base import BaseModel, TimestampMixin, utcnow
from academy.models.enums import ClassStatus

if TYPE_CHECKING:
    from academy.models.student import Student


class ClassSession(BaseModel, TimestampMixin):
    """A scheduled one-to-one class."""

    __tablename__ = "classes"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    teacher_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("teachers.id"),
        nullable=False,
        index=True,
    )
    class_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    status: Mapped[ClassStatus] = mapped_column(
        Enum(ClassStatus, native_enum=False, length=20),
        nullable=False,
        default=ClassStatus.SCHEDULED,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    student: Mapped["Student"] = relationship(back_populates="classes")


class ProgressLog(BaseModel, TimestampMixin):
    """Teacher's note on a student's progress."""

    __tablename__ = "progress_logs"

    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id"),
        nullable=False,
        index=True,
    )
    teacher_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("teachers.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    log_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    student: Mapped["Student"] = relationship(back_populates="progress_logs")
