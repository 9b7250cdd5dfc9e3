"""
Student service.

Data access for students behind a result-returning API: lookups, filtered
listing, enrolment (optionally with a login account), updates, the full
delete cascade, bulk operations and statistics.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy.orm import Session

from academy.core.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    TeacherNotFoundError,
)
from academy.core.identifiers import (
    StudentId,
    TeacherId,
    UserId,
    create_student_id,
    create_teacher_id,
    create_user_id,
)
from academy.models.enums import StudentStatus, UserRole
from academy.models.student import Student
from academy.models.user import User
from academy.repositories.student_repository import StudentRepository
from academy.repositories.user_repository import TeacherRepository, UserRepository
from academy.schemas.common.pagination import PaginationParams
from academy.schemas.student import (
    CreateStudentRequest,
    StudentCounts,
    StudentCreate,
    StudentDto,
    StudentFilters,
    StudentPage,
    StudentStatistics,
    StudentUpdate,
)
from academy.services.base import BaseService, ServiceResult
from academy.services.common.security import hash_password
from academy.services.student.constants import (
    ERROR_EMAIL_PASSWORD_REQUIRED,
    SUCCESS_STATUS_UPDATED,
    SUCCESS_STUDENT_ACCOUNT_CREATED,
    SUCCESS_STUDENT_CREATED,
    SUCCESS_STUDENT_DEACTIVATED,
    SUCCESS_STUDENT_DELETED,
    SUCCESS_STUDENT_UPDATED,
    SUCCESS_STUDENTS_TRANSFERRED,
)

StudentRef = Union[StudentId, str]
TeacherRef = Union[TeacherId, str]
UserRef = Union[UserId, str]


class StudentService(BaseService):
    """
    Student operations.

    Every public method returns a ``ServiceResult``; nothing raises across
    the service boundary. Writes run in a single transaction that is rolled
    back on any failure.
    """

    def __init__(self, db_session: Session):
        super().__init__(db_session)
        self.repository = StudentRepository(db_session)
        self.teachers = TeacherRepository(db_session)
        self.users = UserRepository(db_session)

    # =========================================================================
    # Mapping
    # =========================================================================

    @staticmethod
    def _to_dto(student: Student, counts: Optional[Dict[str, int]] = None) -> StudentDto:
        dto = StudentDto.model_validate(student)
        if counts is not None:
            dto = dto.model_copy(update={"counts": StudentCounts(**counts)})
        return dto

    def _require_teacher(self, teacher_id: TeacherRef) -> TeacherId:
        tid = create_teacher_id(teacher_id)
        if not self.teachers.exists(tid):
            raise TeacherNotFoundError(tid)
        return tid

    # =========================================================================
    # Lookups
    # =========================================================================

    def find_by_id(self, student_id: StudentRef) -> ServiceResult[Optional[StudentDto]]:
        """
        Find a student by ID.

        Returns:
            ServiceResult with the StudentDto, or with ``None`` when no such
            student exists.
        """
        def work() -> Optional[StudentDto]:
            student = self.repository.find_with_relations(create_student_id(student_id))
            return self._to_dto(student) if student else None

        return self._run("find student", work, entity_ref=student_id)

    def find_by_user_id(self, user_id: UserRef) -> ServiceResult[Optional[StudentDto]]:
        """Find the student linked to a login account, or ``None``."""
        def work() -> Optional[StudentDto]:
            student = self.repository.find_by_user_id(create_user_id(user_id))
            return self._to_dto(student) if student else None

        return self._run("find student by user", work, entity_ref=user_id)

    def find_many(
        self,
        filters: Optional[StudentFilters] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> ServiceResult[StudentPage]:
        """
        List students matching ``filters``, one page at a time.

        Search is case-insensitive over full name, contact email and the
        linked account email. Each returned student carries its class,
        invoice and progress log counts.
        """
        filters = filters or StudentFilters()
        pagination = pagination or PaginationParams()

        def work() -> StudentPage:
            if filters.teacher_id:
                create_teacher_id(filters.teacher_id)
            students, total = self.repository.find_many(filters, pagination)
            counts = self.repository.count_relations(s.id for s in students)
            return StudentPage(
                students=[self._to_dto(s, counts.get(s.id)) for s in students],
                total=total,
            )

        result = self._run("list students", work)
        if result.is_success:
            result.add_metadata("page", pagination.page)
            result.add_metadata("limit", pagination.limit)
        return result

    def find_by_teacher(
        self,
        teacher_id: TeacherRef,
        pagination: Optional[PaginationParams] = None,
    ) -> ServiceResult[StudentPage]:
        """List the students assigned to one teacher."""
        return self.find_many(StudentFilters(teacher_id=str(teacher_id)), pagination)

    # =========================================================================
    # Create
    # =========================================================================

    def create(self, data: StudentCreate) -> ServiceResult[StudentDto]:
        """
        Enrol a student with an existing teacher.

        Fails with NOT_FOUND when the teacher (or a given user account)
        does not exist.
        """
        def work() -> StudentDto:
            teacher_id = self._require_teacher(data.teacher_id)
            user_id = None
            if data.user_id:
                user_id = create_user_id(data.user_id)
                if not self.users.exists(user_id):
                    raise EntityNotFoundError("User", user_id)

            student = self.repository.create(
                {
                    "full_name": data.full_name,
                    "age": data.age,
                    "contact_email": str(data.contact_email) if data.contact_email else None,
                    "contact_phone": data.contact_phone,
                    "status": data.status or StudentStatus.ACTIVE,
                    "teacher_id": str(teacher_id),
                    "user_id": str(user_id) if user_id else None,
                }
            )
            self._log_operation("create student", student.id, {"teacher_id": str(teacher_id)})
            return self._to_dto(student)

        return self._run_in_transaction(
            "create student",
            work,
            entity_ref=data.full_name,
            message=SUCCESS_STUDENT_CREATED,
        )

    def create_with_account(self, request: CreateStudentRequest) -> ServiceResult[StudentDto]:
        """
        Enrol a student and, when requested, a STUDENT login account.

        The account and the student are written in one transaction. The
        login email doubles as the contact email when none is given.
        """
        if not request.create_login_account:
            return self.create(
                StudentCreate(
                    full_name=request.full_name,
                    age=request.age,
                    contact_phone=request.contact_phone,
                    contact_email=request.contact_email,
                    teacher_id=request.teacher_id,
                    status=request.status,
                )
            )

        if not request.email or not request.password:
            return ServiceResult.validation_failure(
                ERROR_EMAIL_PASSWORD_REQUIRED,
                field="email" if not request.email else "password",
            )

        login_email = str(request.email).lower()

        def work() -> StudentDto:
            if self.users.email_taken(login_email):
                raise EntityAlreadyExistsError("User", "email", login_email)
            teacher_id = self._require_teacher(request.teacher_id)

            user = self.users.add(
                User(
                    email=login_email,
                    full_name=request.full_name,
                    password_hash=hash_password(request.password),
                    role=UserRole.STUDENT,
                    email_verified=True,
                )
            )
            student = self.repository.create(
                {
                    "full_name": request.full_name,
                    "age": request.age,
                    "contact_email": str(request.contact_email) if request.contact_email else login_email,
                    "contact_phone": request.contact_phone,
                    "status": request.status,
                    "teacher_id": str(teacher_id),
                    "user_id": user.id,
                }
            )
            self._log_operation(
                "create student with account",
                student.id,
                {"user_id": user.id, "teacher_id": str(teacher_id)},
            )
            return self._to_dto(student)

        return self._run_in_transaction(
            "create student account",
            work,
            entity_ref=login_email,
            message=SUCCESS_STUDENT_ACCOUNT_CREATED,
        )

    # =========================================================================
    # Update / Deactivate / Delete
    # =========================================================================

    def update(self, student_id: StudentRef, data: StudentUpdate) -> ServiceResult[StudentDto]:
        """
        Apply the explicitly provided fields of ``data``.

        A changed teacher must exist. Fails with NOT_FOUND when the student
        does not exist.
        """
        def work() -> StudentDto:
            sid = create_student_id(student_id)
            changes: Dict[str, Any] = data.model_dump(exclude_unset=True)
            if "teacher_id" in changes:
                changes["teacher_id"] = str(self._require_teacher(changes["teacher_id"]))
            if changes.get("contact_email") is not None:
                changes["contact_email"] = str(changes["contact_email"])

            if changes:
                student = self.repository.update(sid, changes)
            else:
                student = self.repository.get_by_id(sid)
            self._log_operation("update student", sid, {"fields": sorted(changes)})
            # reload relationships after a teacher change
            self.db.expire(student)
            return self._to_dto(self.repository.find_with_relations(sid))

        return self._run_in_transaction(
            "update student",
            work,
            entity_ref=student_id,
            message=SUCCESS_STUDENT_UPDATED,
        )

    def deactivate(self, student_id: StudentRef) -> ServiceResult[StudentDto]:
        """Set the student's status to INACTIVE."""
        result = self.update(student_id, StudentUpdate(status=StudentStatus.INACTIVE))
        if result.is_success:
            result.message = SUCCESS_STUDENT_DEACTIVATED
        return result

    def delete(
        self,
        student_id: StudentRef,
        delete_account: bool = False,
    ) -> ServiceResult[Dict[str, Any]]:
        """
        Delete a student with its progress logs, classes, invoices and
        the receipts attached to those invoices.

        Args:
            student_id: Student to remove
            delete_account: Also remove the linked login account

        Returns:
            ServiceResult with the number of rows removed per table
        """
        def work() -> Dict[str, Any]:
            sid = create_student_id(student_id)
            user_id = self.repository.get_by_id(sid).user_id
            removed = self.repository.delete_with_related(sid)
            removed["user"] = None
            if delete_account and user_id:
                self.users.delete(user_id)
                removed["user"] = user_id
            self._log_operation("delete student", sid, {"removed": removed})
            return removed

        return self._run_in_transaction(
            "delete student",
            work,
            entity_ref=student_id,
            message=SUCCESS_STUDENT_DELETED,
        )

    # =========================================================================
    # Counts & checks
    # =========================================================================

    def get_active_count(self) -> ServiceResult[int]:
        return self._run(
            "count active students",
            lambda: self.repository.count_by_status(StudentStatus.ACTIVE),
        )

    def exists(self, student_id: StudentRef) -> ServiceResult[bool]:
        return self._run(
            "check student exists",
            lambda: self.repository.exists(create_student_id(student_id)),
            entity_ref=student_id,
        )

    def email_exists(self, email: str) -> ServiceResult[bool]:
        """True when a student's contact email or account email matches."""
        if not email or not email.strip():
            return ServiceResult.success(False)
        return self._run(
            "check student email",
            lambda: self.repository.email_exists(email),
            entity_ref=email,
        )

    def get_statistics(self) -> ServiceResult[StudentStatistics]:
        def work() -> StudentStatistics:
            breakdown = self.repository.get_status_breakdown()
            return StudentStatistics(
                total=sum(breakdown.values()),
                active=breakdown[StudentStatus.ACTIVE],
                inactive=breakdown[StudentStatus.INACTIVE],
                trial=breakdown[StudentStatus.TRIAL],
                with_login_account=self.repository.count_with_login_account(),
            )

        return self._run("compute student statistics", work)

    # =========================================================================
    # Bulk operations
    # =========================================================================

    def bulk_update_status(
        self,
        student_ids: Sequence[StudentRef],
        status: Union[StudentStatus, str],
    ) -> ServiceResult[int]:
        """
        Set ``status`` on every listed student.

        Returns:
            ServiceResult with the number of students updated
        """
        def work() -> int:
            new_status = StudentStatus(status)
            ids: List[str] = [str(create_student_id(i)) for i in student_ids]
            updated = self.repository.bulk_update_status(ids, new_status)
            self._log_operation("bulk update status", None, {"count": updated, "status": new_status.value})
            return updated

        return self._run_in_transaction("bulk update student status", work, message=SUCCESS_STATUS_UPDATED)

    def transfer_to_teacher(
        self,
        student_ids: Sequence[StudentRef],
        teacher_id: TeacherRef,
    ) -> ServiceResult[int]:
        """
        Reassign the listed students to another teacher.

        Fails with NOT_FOUND when the target teacher does not exist.
        """
        def work() -> int:
            tid = self._require_teacher(teacher_id)
            ids: List[str] = [str(create_student_id(i)) for i in student_ids]
            updated = self.repository.bulk_assign_teacher(ids, tid)
            self._log_operation("transfer students", tid, {"count": updated})
            return updated

        return self._run_in_transaction(
            "transfer students",
            work,
            entity_ref=teacher_id,
            message=SUCCESS_STUDENTS_TRANSFERRED,
        )


def create_student_service(db_session: Session) -> StudentService:
    """Build a StudentService bound to ``db_session``."""
    return StudentService(db_session)
