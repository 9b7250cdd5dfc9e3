"""
ORM models. Importing this package registers every table on the metadata.
"""

from academy.models.base import BaseModel, TimestampMixin
from academy.models.enums import (
    ClassStatus,
    InvoiceStatus,
    InvoiceType,
    ReceiptVerificationStatus,
    StudentStatus,
    UserRole,
)
from academy.models.user import Teacher, User
from academy.models.student import Student
from academy.models.academics import ClassSession, ProgressLog
from academy.models.billing import Invoice, PaymentReceipt

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "ClassStatus",
    "InvoiceStatus",
    "InvoiceType",
    "ReceiptVerificationStatus",
    "StudentStatus",
    "UserRole",
    "User",
    "Teacher",
    "Student",
    "ClassSession",
    "ProgressLog",
    "Invoice",
    "PaymentReceipt",
]
