"""
Billing models: invoices and uploaded payment receipts.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from academy.models.base import BaseModel, TimestampMixin, utcnow
from academy.models.enums import InvoiceStatus, InvoiceType, ReceiptVerificationStatus

if TYPE_CHECKING:
    from academy.models.student import Student


class Invoice(BaseModel, TimestampMixin):
    """Invoice issued to a student."""

    __tablename__ = "invoices"

    invoice_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    invoice_type: Mapped[InvoiceType] = mapped_column(
        Enum(InvoiceType, native_enum=False, length=20),
        nullable=False,
        default=InvoiceType.MONTHLY,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    status: Mapped[InvoiceStatus] = mapped_column(
        Enum(InvoiceStatus, native_enum=False, length=30),
        nullable=False,
        default=InvoiceStatus.UNPAID,
    )
    issue_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    student_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("students.id"),
        nullable=True,
        index=True,
    )

    student: Mapped[Optional["Student"]] = relationship(back_populates="invoices")
    payment_receipts: Mapped[List["PaymentReceipt"]] = relationship(back_populates="invoice")


class PaymentReceipt(BaseModel, TimestampMixin):
    """Receipt uploaded against an invoice."""

    __tablename__ = "payment_receipts"

    invoice_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("invoices.id"),
        nullable=False,
        index=True,
    )
    file_url: Mapped[str] = mapped_column(String(500), nullable=False)
    uploaded_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    uploaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    verification_status: Mapped[ReceiptVerificationStatus] = mapped_column(
        Enum(ReceiptVerificationStatus, native_enum=False, length=20),
        nullable=False,
        default=ReceiptVerificationStatus.PENDING,
    )
    verified_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    invoice: Mapped[Invoice] = relationship(back_populates="payment_receipts")
