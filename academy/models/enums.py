"""
Database enums shared by models and schemas.
"""

import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class StudentStatus(str, enum.Enum):
    """Student lifecycle status."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TRIAL = "TRIAL"


class ClassStatus(str, enum.Enum):
    """Scheduled class status."""
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class InvoiceStatus(str, enum.Enum):
    """Invoice payment status."""
    UNPAID = "UNPAID"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    PENDING_VERIFICATION = "PENDING_VERIFICATION"
    CANCELLED = "CANCELLED"


class InvoiceType(str, enum.Enum):
    """Invoice categorization."""
    ENROLLMENT = "ENROLLMENT"
    MONTHLY = "MONTHLY"
    OTHER = "OTHER"


class ReceiptVerificationStatus(str, enum.Enum):
    """Payment receipt review status."""
    PENDING = "PENDING"
    SUBMITTED = "SUBMITTED"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
