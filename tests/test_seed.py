from __future__ import annotations

from sqlalchemy.orm import Session

from academy.db.seed import PARENT_MANAGED_STUDENT_ID, seed
from academy.models import ClassSession, Invoice, ProgressLog, Student, StudentStatus, Teacher, User
from academy.services.student import create_student_service


def test_seed_creates_demo_data(db_session: Session) -> None:
    seed(db_session)
    db_session.commit()

    assert db_session.query(User).count() == 5
    assert db_session.query(Teacher).count() == 2
    assert db_session.query(Student).count() == 3
    assert db_session.query(ClassSession).count() == 2
    assert db_session.query(ProgressLog).count() == 2
    assert db_session.query(Invoice).count() == 2

    trial = db_session.get(Student, PARENT_MANAGED_STUDENT_ID)
    assert trial.status is StudentStatus.TRIAL
    assert trial.user_id is None


def test_seed_is_idempotent(db_session: Session) -> None:
    seed(db_session)
    db_session.commit()
    seed(db_session)
    db_session.commit()

    assert db_session.query(User).count() == 5
    assert db_session.query(Student).count() == 3
    assert db_session.query(ClassSession).count() == 2


def test_seeded_statistics(db_session: Session) -> None:
    seed(db_session)
    db_session.commit()

    stats = create_student_service(db_session).get_statistics().unwrap()

    assert stats.total == 3
    assert stats.active == 2
    assert stats.trial == 1
    assert stats.with_login_account == 2
