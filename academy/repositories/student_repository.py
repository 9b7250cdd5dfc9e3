"""
Student repository.

Student lookups with teacher/account eager loading, filtered listing,
relation counts, bulk updates and the full delete cascade.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Query, Session, joinedload

from academy.core.constants import DEFAULT_SORT_BY, STUDENT_SORTABLE_FIELDS
from academy.core.exceptions import StudentNotFoundError
from academy.models.academics import ClassSession, ProgressLog
from academy.models.base import utcnow
from academy.models.billing import Invoice, PaymentReceipt
from academy.models.enums import StudentStatus
from academy.models.student import Student
from academy.models.user import Teacher, User
from academy.repositories.base_repository import BaseRepository
from academy.schemas.common.pagination import PaginationParams
from academy.schemas.student import StudentFilters


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class StudentRepository(BaseRepository[Student]):
    """
    Student repository.

    Handles:
        - Lookups by student ID and by linked user account
        - Filtered, searched and ordered listing with totals
        - Per-student counts of classes, invoices and progress logs
        - Bulk status changes and teacher transfers
        - Deletion of a student together with all dependent records
    """

    not_found_error = StudentNotFoundError

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        super().__init__(Student, db)

    def _base_query(self) -> Query:
        return self.db.query(Student).options(
            joinedload(Student.user),
            joinedload(Student.teacher).joinedload(Teacher.user),
        )

    # ============================================================================
    # LOOKUPS
    # ============================================================================

    def find_with_relations(self, student_id: str) -> Optional[Student]:
        """Find a student with teacher and user account loaded."""
        return self._base_query().filter(Student.id == str(student_id)).first()

    def find_by_user_id(self, user_id: str) -> Optional[Student]:
        """Find the student profile attached to a login account."""
        return self._base_query().filter(Student.user_id == str(user_id)).first()

    def find_by_email(self, email: str) -> Optional[Student]:
        """Find a student by contact email or linked account email."""
        needle = email.strip().lower()
        return (
            self._base_query()
            .outerjoin(User, Student.user_id == User.id)
            .filter(
                or_(
                    func.lower(Student.contact_email) == needle,
                    func.lower(User.email) == needle,
                )
            )
            .first()
        )

    # ============================================================================
    # LISTING
    # ============================================================================

    def _filtered_query(self, filters: StudentFilters) -> Query:
        query = self.db.query(Student)

        if filters.status:
            query = query.filter(Student.status == filters.status)

        if filters.teacher_id:
            query = query.filter(Student.teacher_id == str(filters.teacher_id))

        if filters.search:
            pattern = _like_pattern(filters.search)
            query = query.outerjoin(User, Student.user_id == User.id).filter(
                or_(
                    Student.full_name.ilike(pattern, escape="\\"),
                    Student.contact_email.ilike(pattern, escape="\\"),
                    User.email.ilike(pattern, escape="\\"),
                )
            )

        return query

    def find_many(
        self,
        filters: StudentFilters,
        pagination: PaginationParams,
    ) -> Tuple[List[Student], int]:
        """
        Find one page of students matching ``filters``.

        Unknown sort fields fall back to ``created_at``.

        Returns:
            Tuple of (students on the page, total matches)
        """
        query = self._filtered_query(filters)
        total = query.count()

        sort_field = pagination.sort_by if pagination.sort_by in STUDENT_SORTABLE_FIELDS else DEFAULT_SORT_BY
        column = getattr(Student, sort_field)
        ordering = column.asc() if pagination.sort_order == "asc" else column.desc()

        students = (
            query.options(
                joinedload(Student.user),
                joinedload(Student.teacher).joinedload(Teacher.user),
            )
            .order_by(ordering, Student.id.asc())
            .offset(pagination.offset)
            .limit(pagination.limit)
            .all()
        )
        return students, total

    def count_relations(self, student_ids: Iterable[str]) -> Dict[str, Dict[str, int]]:
        """
        Count classes, invoices and progress logs per student.

        Returns:
            Mapping of student ID to {"classes", "invoices", "progress_logs"}
        """
        ids = [str(i) for i in student_ids]
        counts: Dict[str, Dict[str, int]] = {
            sid: {"classes": 0, "invoices": 0, "progress_logs": 0} for sid in ids
        }
        if not ids:
            return counts

        for key, model in (
            ("classes", ClassSession),
            ("invoices", Invoice),
            ("progress_logs", ProgressLog),
        ):
            rows = (
                self.db.query(model.student_id, func.count(model.id))
                .filter(model.student_id.in_(ids))
                .group_by(model.student_id)
                .all()
            )
            for student_id, n in rows:
                counts[student_id][key] = n

        return counts

    # ============================================================================
    # COUNTS & CHECKS
    # ============================================================================

    def count_by_status(self, status: Optional[StudentStatus] = None) -> int:
        query = self.db.query(func.count(Student.id))
        if status is not None:
            query = query.filter(Student.status == status)
        return query.scalar() or 0

    def count_with_login_account(self) -> int:
        return self.db.query(func.count(Student.id)).filter(Student.user_id.isnot(None)).scalar() or 0

    def get_status_breakdown(self) -> Dict[StudentStatus, int]:
        """Count students per status; statuses with no students map to 0."""
        rows = (
            self.db.query(Student.status, func.count(Student.id))
            .group_by(Student.status)
            .all()
        )
        breakdown = {status: 0 for status in StudentStatus}
        for status, n in rows:
            breakdown[StudentStatus(status)] = n
        return breakdown

    def email_exists(self, email: str) -> bool:
        """True if any student's contact email or account email matches."""
        needle = email.strip().lower()
        count = (
            self.db.query(func.count(Student.id))
            .outerjoin(User, Student.user_id == User.id)
            .filter(
                or_(
                    func.lower(Student.contact_email) == needle,
                    func.lower(User.email) == needle,
                )
            )
            .scalar()
        )
        return bool(count)

    # ============================================================================
    # BULK OPERATIONS
    # ============================================================================

    def bulk_update_status(self, student_ids: List[str], new_status: StudentStatus) -> int:
        """
        Set the status of many students at once.

        Returns:
            Number of students updated
        """
        ids = [str(i) for i in student_ids]
        if not ids:
            return 0
        updated = (
            self.db.query(Student)
            .filter(Student.id.in_(ids))
            .update(
                {Student.status: new_status, Student.updated_at: utcnow()},
                synchronize_session="fetch",
            )
        )
        self.db.flush()
        return updated

    def bulk_assign_teacher(self, student_ids: List[str], teacher_id: str) -> int:
        """
        Move many students to another teacher.

        Returns:
            Number of students updated
        """
        ids = [str(i) for i in student_ids]
        if not ids:
            return 0
        updated = (
            self.db.query(Student)
            .filter(Student.id.in_(ids))
            .update(
                {Student.teacher_id: str(teacher_id), Student.updated_at: utcnow()},
                synchronize_session="fetch",
            )
        )
        self.db.flush()
        return updated

    # ============================================================================
    # DELETION
    # ============================================================================

    def delete_with_related(self, student_id: str) -> Dict[str, Any]:
        """
        Delete a student and every dependent record.

        Order keeps referential integrity: progress logs, classes, receipts
        of the student's invoices, invoices, then the student row.

        Raises:
            StudentNotFoundError: If the student does not exist

        Returns:
            Number of rows removed per table
        """
        student = self.get_by_id(student_id)
        sid = student.id

        removed: Dict[str, Any] = {}
        removed["progress_logs"] = (
            self.db.query(ProgressLog)
            .filter(ProgressLog.student_id == sid)
            .delete(synchronize_session="fetch")
        )
        removed["classes"] = (
            self.db.query(ClassSession)
            .filter(ClassSession.student_id == sid)
            .delete(synchronize_session="fetch")
        )

        invoice_ids = [
            row[0] for row in self.db.query(Invoice.id).filter(Invoice.student_id == sid).all()
        ]
        removed["payment_receipts"] = 0
        if invoice_ids:
            removed["payment_receipts"] = (
                self.db.query(PaymentReceipt)
                .filter(PaymentReceipt.invoice_id.in_(invoice_ids))
                .delete(synchronize_session="fetch")
            )
        removed["invoices"] = (
            self.db.query(Invoice)
            .filter(Invoice.student_id == sid)
            .delete(synchronize_session="fetch")
        )

        # drop stale collections before deleting the parent row
        self.db.expire(student)
        self.db.delete(student)
        self.db.flush()
        removed["student"] = sid
        return removed
