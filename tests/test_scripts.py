from __future__ import annotations

from typing import Callable

import pytest
from sqlalchemy.orm import Session

from academy.models import Student, StudentStatus, Teacher, User, UserRole
from scripts import check_student_status, delete_student


@pytest.fixture(autouse=True)
def script_session(monkeypatch: pytest.MonkeyPatch, db_session: Session) -> None:
    """Point both scripts at the test database."""
    monkeypatch.setattr(check_student_status, "SessionLocal", lambda: db_session)
    monkeypatch.setattr(delete_student, "SessionLocal", lambda: db_session)


def test_status_report_lists_students_and_summary(
    make_student: Callable[..., Student], capsys: pytest.CaptureFixture[str]
) -> None:
    make_student("Aisha Mohammed", login_email="aisha@example.com")
    make_student("Omar Hassan", status=StudentStatus.TRIAL)

    assert check_student_status.main([]) == 0

    out = capsys.readouterr().out
    assert "Aisha Mohammed" in out
    assert "teacher: Ustadh Ahmed" in out
    assert "aisha@example.com" in out
    assert "no login account" in out
    assert "Total: 2  Active: 1  Inactive: 0  Trial: 1  With login: 1" in out


def test_status_report_filters_by_status(
    make_student: Callable[..., Student], capsys: pytest.CaptureFixture[str]
) -> None:
    make_student("Aisha Mohammed")
    make_student("Omar Hassan", status=StudentStatus.TRIAL)

    assert check_student_status.main(["--status", "TRIAL"]) == 0

    out = capsys.readouterr().out
    assert "Omar Hassan" in out
    assert "Aisha Mohammed" not in out


def test_status_report_shows_email_for_unnamed_teacher(
    db_session: Session,
    make_student: Callable[..., Student],
    capsys: pytest.CaptureFixture[str],
) -> None:
    unnamed = Teacher(user=User(email="unnamed@example.com", role=UserRole.TEACHER))
    db_session.add(unnamed)
    db_session.commit()
    make_student("Bilal Ahmed", teacher=unnamed)

    assert check_student_status.main([]) == 0

    assert "teacher: unnamed@example.com" in capsys.readouterr().out


def test_delete_script_removes_student_and_account(
    db_session: Session,
    make_student: Callable[..., Student],
    capsys: pytest.CaptureFixture[str],
) -> None:
    student = make_student("Aisha Mohammed", contact_email="parent@example.com", login_email="aisha@example.com")
    student_id, user_id = student.id, student.user_id

    assert delete_student.main(["parent@example.com"]) == 0

    assert f"student: {student_id}" in capsys.readouterr().out
    assert db_session.query(Student).count() == 0
    assert db_session.query(User).filter_by(id=user_id).count() == 0


def test_delete_script_can_keep_account(
    db_session: Session, make_student: Callable[..., Student]
) -> None:
    student = make_student("Omar Hassan", login_email="omar@example.com")
    user_id = student.user_id

    assert delete_student.main(["OMAR@example.com", "--keep-account"]) == 0

    assert db_session.query(Student).count() == 0
    assert db_session.query(User).filter_by(id=user_id).count() == 1


def test_delete_script_reports_unknown_email(capsys: pytest.CaptureFixture[str]) -> None:
    assert delete_student.main(["nobody@example.com"]) == 1

    assert "No student with email 'nobody@example.com' found" in capsys.readouterr().err
