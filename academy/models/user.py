"""
User and teacher models.

A User is a login account; a Teacher is the teaching profile attached to
a user with the TEACHER role.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from academy.models.base import BaseModel, TimestampMixin
from academy.models.enums import UserRole

if TYPE_CHECKING:
    from academy.models.student import Student


class User(BaseModel, TimestampMixin):
    """Login account."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=20),
        nullable=False,
        default=UserRole.STUDENT,
    )
    email_verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    must_reset_password: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    teacher_profile: Mapped[Optional["Teacher"]] = relationship(
        back_populates="user",
        uselist=False,
    )
    student_profile: Mapped[Optional["Student"]] = relationship(
        back_populates="user",
        uselist=False,
    )

    @validates("email")
    def validate_email(self, key: str, value: str) -> str:
        """Normalize email to lower case."""
        return value.strip().lower() if value else value


class Teacher(BaseModel, TimestampMixin):
    """Teaching profile linked to a user account."""

    __tablename__ = "teachers"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    user: Mapped[User] = relationship(back_populates="teacher_profile")
    students: Mapped[List["Student"]] = relationship(back_populates="teacher")
