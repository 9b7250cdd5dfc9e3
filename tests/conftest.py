from __future__ import annotations

import os

# Settings are read once at import time.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator, Optional

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from academy.db.base import Base, import_models
from academy.db.session import build_engine
from academy.models import Student, StudentStatus, Teacher, User, UserRole
from academy.services.student import StudentService, create_student_service

BASE_TIME = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def engine() -> Iterator[Engine]:
    """In-memory database shared by every connection of one test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    import_models()
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def service(db_session: Session) -> StudentService:
    return create_student_service(db_session)


@pytest.fixture()
def make_teacher(db_session: Session) -> Callable[..., Teacher]:
    counter = {"n": 0}

    def factory(full_name: Optional[str] = None, email: Optional[str] = None) -> Teacher:
        counter["n"] += 1
        n = counter["n"]
        user = User(
            email=email or f"teacher{n}@example.com",
            full_name=full_name or f"Teacher {n}",
            role=UserRole.TEACHER,
            email_verified=True,
        )
        teacher = Teacher(user=user, bio="Tajweed instructor")
        db_session.add(teacher)
        db_session.commit()
        return teacher

    return factory


@pytest.fixture()
def teacher(make_teacher: Callable[..., Teacher]) -> Teacher:
    return make_teacher(full_name="Ustadh Ahmed", email="ahmed@example.com")


@pytest.fixture()
def make_student(db_session: Session, teacher: Teacher) -> Callable[..., Student]:
    """
    Insert a student directly. Each call gets a ``created_at`` one minute
    after the previous one so default ordering is deterministic.
    """
    counter = {"n": 0}

    def factory(
        full_name: str = "Aisha Mohammed",
        *,
        teacher: Teacher = teacher,
        status: StudentStatus = StudentStatus.ACTIVE,
        contact_email: Optional[str] = None,
        age: Optional[int] = None,
        login_email: Optional[str] = None,
    ) -> Student:
        counter["n"] += 1
        created = BASE_TIME + timedelta(minutes=counter["n"])
        student = Student(
            full_name=full_name,
            teacher_id=teacher.id,
            status=status,
            contact_email=contact_email,
            age=age,
            created_at=created,
            updated_at=created,
        )
        if login_email:
            student.user = User(email=login_email, full_name=full_name, role=UserRole.STUDENT)
        db_session.add(student)
        db_session.commit()
        return student

    return factory
