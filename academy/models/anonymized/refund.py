from enum import Enum

from academy import db
from academy.helpers.db import enum_column
from academy.helpers.anonymization import anonymize_text
from .base import AnonymizedModel, FINANCIAL_RETENTION_YEARS


class AnonymizedRefundStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


REFUND_STATUS_MAP = {status.value: status for status in AnonymizedRefundStatus}


class AnonymizedRefund(AnonymizedModel):
    __tablename__ = "anon_refund"

    retention_years = FINANCIAL_RETENTION_YEARS
    natural_key = ("original_refund_request_id",)

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    original_refund_request_id = db.Column(
        db.Integer, unique=True, nullable=False
    )
    session_enrollment_reference = db.Column(db.String(50), nullable=False)
    academy_id = db.Column(db.Integer, nullable=False)
    class_id = db.Column(db.Integer, nullable=True)
    reason = db.Column(db.String(50), nullable=False)
    detailed_reason = db.Column(db.Text, nullable=True)
    requested_amount = db.Column(db.Numeric(12, 2), nullable=False)
    actual_refund_amount = db.Column(db.Numeric(12, 2), nullable=True)
    status = enum_column(AnonymizedRefundStatus, nullable=False)
    process_reason = db.Column(db.Text, nullable=True)
    processed_by_role = db.Column(db.String(20), nullable=True)
    requested_at = db.Column(db.DateTime, nullable=False)
    processed_at = db.Column(db.DateTime, nullable=True)
    completed_at = db.Column(db.DateTime, nullable=True)
    data_retention_until = db.Column(db.DateTime, nullable=False)

    @classmethod
    def anonymize(cls, refund, anonymous_user_id, withdrawal_date):
        session = refund.session_enrollment.session
        status = cls.map_status(
            refund.status, REFUND_STATUS_MAP, AnonymizedRefundStatus.PENDING
        )
        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.original_refund_request_id = refund.id
        anonymized.session_enrollment_reference = str(
            refund.session_enrollment_id
        )
        anonymized.academy_id = session.class_.academy_id
        anonymized.class_id = session.class_id
        # reason is a category code, the free text lives in detailed_reason
        anonymized.reason = refund.reason
        anonymized.detailed_reason = anonymize_text(refund.detailed_reason)
        anonymized.requested_amount = refund.refund_amount
        anonymized.actual_refund_amount = refund.actual_refund_amount
        anonymized.status = status
        anonymized.process_reason = anonymize_text(refund.process_reason)
        anonymized.processed_by_role = (
            refund.processor.role.value if refund.processor else None
        )
        anonymized.requested_at = refund.requested_at
        anonymized.processed_at = refund.processed_at
        anonymized.completed_at = (
            refund.processed_at
            if status == AnonymizedRefundStatus.COMPLETED
            else None
        )
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )

        return anonymized
