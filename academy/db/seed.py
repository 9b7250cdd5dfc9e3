"""
Development seed data.

Run with ``python -m academy.db.seed``. Safe to run repeatedly: users are
matched by email and the parent-managed student by its fixed ID, and
classes, progress logs and invoices are only added for newly created
students.
"""

from datetime import timedelta
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from academy.config.logging import get_logger, setup_logging
from academy.db.init_db import init_db
from academy.db.session import get_db_context
from academy.models import (
    ClassSession,
    ClassStatus,
    Invoice,
    InvoiceStatus,
    InvoiceType,
    ProgressLog,
    Student,
    StudentStatus,
    Teacher,
    User,
    UserRole,
)
from academy.models.base import utcnow
from academy.repositories.user_repository import TeacherRepository, UserRepository
from academy.services.common.security import hash_password

logger = get_logger(__name__)

PARENT_MANAGED_STUDENT_ID = "seed-student-3"


def _ensure_user(
    db: Session,
    email: str,
    full_name: str,
    password: str,
    role: UserRole,
) -> User:
    users = UserRepository(db)
    user = users.find_by_email(email)
    if user is None:
        user = users.add(
            User(
                email=email,
                full_name=full_name,
                password_hash=hash_password(password),
                role=role,
                email_verified=True,
            )
        )
        logger.info(f"Created {role.value.lower()} {email}")
    return user


def _ensure_teacher(db: Session, user: User, bio: str) -> Teacher:
    teachers = TeacherRepository(db)
    teacher = teachers.find_by_user_id(user.id)
    if teacher is None:
        teacher = teachers.add(Teacher(user_id=user.id, bio=bio))
    return teacher


def _ensure_student(
    db: Session,
    teacher: Teacher,
    full_name: str,
    age: int,
    contact_email: str,
    contact_phone: str,
    status: StudentStatus = StudentStatus.ACTIVE,
    user: Optional[User] = None,
    student_id: Optional[str] = None,
) -> Tuple[Student, bool]:
    query = db.query(Student)
    if user is not None:
        existing = query.filter(Student.user_id == user.id).first()
    else:
        existing = query.filter(Student.id == student_id).first()
    if existing is not None:
        return existing, False

    student = Student(
        full_name=full_name,
        age=age,
        contact_email=contact_email,
        contact_phone=contact_phone,
        teacher_id=teacher.id,
        status=status,
        user_id=user.id if user else None,
    )
    if student_id:
        student.id = student_id
    db.add(student)
    db.flush()
    logger.info(f"Created student {full_name}")
    return student, True


def seed(db: Session) -> None:
    """Insert the demo admin, teachers, students and their activity."""
    _ensure_user(db, "admin@alshahid.com", "Admin User", "Admin123!", UserRole.ADMIN)

    teacher1 = _ensure_teacher(
        db,
        _ensure_user(db, "ustadh.ahmed@alshahid.com", "Ustadh Ahmed Rahman", "Teacher123!", UserRole.TEACHER),
        "Hafiz with 15 years of teaching experience. Specializes in Tajweed and Quran memorization.",
    )
    teacher2 = _ensure_teacher(
        db,
        _ensure_user(db, "ustadh.ibrahim@alshahid.com", "Ustadh Ibrahim Ali", "Teacher123!", UserRole.TEACHER),
        "Expert in Quranic Arabic and Islamic studies with Ijazah in multiple Qira'at.",
    )

    student1, new1 = _ensure_student(
        db,
        teacher1,
        "Aisha Mohammed",
        12,
        "parent1@example.com",
        "+1-555-0101",
        user=_ensure_user(db, "student1@example.com", "Aisha Mohammed", "Student123!", UserRole.STUDENT),
    )
    student2, new2 = _ensure_student(
        db,
        teacher1,
        "Omar Hassan",
        15,
        "parent2@example.com",
        "+1-555-0102",
        user=_ensure_user(db, "student2@example.com", "Omar Hassan", "Student123!", UserRole.STUDENT),
    )
    _ensure_student(
        db,
        teacher2,
        "Fatima Ali",
        8,
        "parent3@example.com",
        "+1-555-0103",
        status=StudentStatus.TRIAL,
        student_id=PARENT_MANAGED_STUDENT_ID,
    )

    now = utcnow()
    tomorrow = (now + timedelta(days=1)).replace(hour=10, minute=0, second=0, microsecond=0)
    next_week = (now + timedelta(days=7)).replace(hour=14, minute=0, second=0, microsecond=0)
    due_date = now + timedelta(days=30)

    if new1:
        db.add_all([
            ClassSession(
                student_id=student1.id,
                teacher_id=teacher1.id,
                class_time=tomorrow,
                duration_minutes=30,
                status=ClassStatus.SCHEDULED,
                notes="Continuing Surah Al-Baqarah",
            ),
            ProgressLog(
                student_id=student1.id,
                teacher_id=teacher1.id,
                title="Completed Surah Al-Fatiha memorization",
                notes=(
                    "Excellent progress! Aisha has successfully memorized Surah Al-Fatiha "
                    "with proper Tajweed. Ready to move to Surah Al-Baqarah."
                ),
            ),
            Invoice(
                invoice_number=f"INV-{now:%Y%m}-{student1.id[:8].upper()}",
                invoice_type=InvoiceType.MONTHLY,
                amount=Decimal("150.00"),
                status=InvoiceStatus.UNPAID,
                due_date=due_date,
                student_id=student1.id,
            ),
        ])
    if new2:
        db.add_all([
            ClassSession(
                student_id=student2.id,
                teacher_id=teacher1.id,
                class_time=next_week,
                duration_minutes=45,
                status=ClassStatus.SCHEDULED,
                notes="Tajweed rules review",
            ),
            ProgressLog(
                student_id=student2.id,
                teacher_id=teacher1.id,
                title="Tajweed improvement",
                notes=(
                    "Omar is making great progress with Tajweed rules. Focusing on proper "
                    "pronunciation of letters from the throat."
                ),
            ),
            Invoice(
                invoice_number=f"INV-{now:%Y%m}-{student2.id[:8].upper()}",
                invoice_type=InvoiceType.MONTHLY,
                amount=Decimal("180.00"),
                status=InvoiceStatus.PAID,
                due_date=due_date,
                student_id=student2.id,
            ),
        ])
    db.flush()


def main() -> None:
    setup_logging()
    init_db()
    with get_db_context() as db:
        seed(db)
    logger.info("Seed complete")


if __name__ == "__main__":
    main()
