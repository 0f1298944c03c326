from enum import Enum

from academy import db
from academy.helpers.db import enum_column
from .base import AnonymizedModel, FINANCIAL_RETENTION_YEARS


class AnonymizedPaymentStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"


PAYMENT_STATUS_MAP = {
    "PENDING": AnonymizedPaymentStatus.PENDING,
    "COMPLETED": AnonymizedPaymentStatus.COMPLETED,
    "PAID": AnonymizedPaymentStatus.COMPLETED,
    "FAILED": AnonymizedPaymentStatus.FAILED,
    "CANCELLED": AnonymizedPaymentStatus.CANCELLED,
    "REFUNDED": AnonymizedPaymentStatus.REFUNDED,
}


class AnonymizedPayment(AnonymizedModel):
    __tablename__ = "anon_payment"

    retention_years = FINANCIAL_RETENTION_YEARS
    natural_key = ("original_payment_id",)

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    original_payment_id = db.Column(db.Integer, unique=True, nullable=False)
    session_enrollment_reference = db.Column(db.String(50), nullable=True)
    academy_id = db.Column(db.Integer, nullable=True)
    class_id = db.Column(db.Integer, nullable=True)
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    status = enum_column(AnonymizedPaymentStatus, nullable=False)
    method = db.Column(db.String(30), nullable=True)
    paid_at = db.Column(db.DateTime, nullable=True)
    receipt_number = db.Column(db.String(100), nullable=True)
    data_retention_until = db.Column(db.DateTime, nullable=False)

    @classmethod
    def anonymize(cls, payment, anonymous_user_id, withdrawal_date):
        session = payment.session_enrollment.session
        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.original_payment_id = payment.id
        anonymized.session_enrollment_reference = str(
            payment.session_enrollment_id
        )
        anonymized.academy_id = session.class_.academy_id
        anonymized.class_id = session.class_id
        anonymized.amount = payment.amount
        anonymized.status = cls.map_status(
            payment.status,
            PAYMENT_STATUS_MAP,
            AnonymizedPaymentStatus.PENDING,
        )
        anonymized.method = payment.method
        anonymized.paid_at = payment.paid_at
        anonymized.receipt_number = None
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )

        return anonymized
