"""
Nominal identifier types.

Each entity gets its own ``str`` subclass so a ``StudentId`` can never be
passed where a ``TeacherId`` is expected without an explicit conversion.
Values still behave as plain strings for the ORM and for JSON.
"""

from typing import Any, Type, TypeVar

from academy.core.exceptions import InvalidIdentifierError

TId = TypeVar("TId", bound="EntityId")


class EntityId(str):
    """Base for all entity identifiers."""

    kind: str = "entity"

    def __new__(cls: Type[TId], value: Any) -> TId:
        if isinstance(value, EntityId) and not isinstance(value, cls):
            raise InvalidIdentifierError(cls.kind, value)
        if not isinstance(value, str) or not value.strip():
            raise InvalidIdentifierError(cls.kind, value)
        return super().__new__(cls, value.strip())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EntityId) and type(other) is not type(self):
            return False
        return str.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = str.__hash__


class UserId(EntityId):
    kind = "user"


class StudentId(EntityId):
    kind = "student"


class TeacherId(EntityId):
    kind = "teacher"


class InvoiceId(EntityId):
    kind = "invoice"


def create_user_id(value: Any) -> UserId:
    """Validate and wrap a raw user identifier."""
    return UserId(value)


def create_student_id(value: Any) -> StudentId:
    """Validate and wrap a raw student identifier."""
    return StudentId(value)


def create_teacher_id(value: Any) -> TeacherId:
    """Validate and wrap a raw teacher identifier."""
    return TeacherId(value)


def create_invoice_id(value: Any) -> InvoiceId:
    """Validate and wrap a raw invoice identifier."""
    return InvoiceId(value)
