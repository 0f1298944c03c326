from enum import Enum

from academy import db
from academy.helpers.db import enum_column
from .base import AnonymizedModel, ENROLLMENT_RETENTION_YEARS


class AnonymizedEnrollmentStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


SESSION_ENROLLMENT_STATUS_MAP = {
    "PENDING": AnonymizedEnrollmentStatus.PENDING,
    "APPROVED": AnonymizedEnrollmentStatus.APPROVED,
    "REJECTED": AnonymizedEnrollmentStatus.REJECTED,
    "CANCELLED": AnonymizedEnrollmentStatus.CANCELLED,
    "COMPLETED": AnonymizedEnrollmentStatus.COMPLETED,
    "CONFIRMED": AnonymizedEnrollmentStatus.APPROVED,
    "ATTENDED": AnonymizedEnrollmentStatus.COMPLETED,
    "REFUND_REQUESTED": AnonymizedEnrollmentStatus.CANCELLED,
}

APPROVED_SOURCE_STATUSES = {"APPROVED", "CONFIRMED", "ATTENDED", "COMPLETED"}


class AnonymizedSessionEnrollment(AnonymizedModel):
    __tablename__ = "anon_session_enrollment"

    retention_years = ENROLLMENT_RETENTION_YEARS
    natural_key = ("original_session_enrollment_id",)

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    original_session_enrollment_id = db.Column(
        db.Integer, unique=True, nullable=False
    )
    session_id = db.Column(db.Integer, nullable=False)
    class_id = db.Column(db.Integer, nullable=False)
    academy_id = db.Column(db.Integer, nullable=False)
    session_date = db.Column(db.Date, nullable=False)
    status = enum_column(AnonymizedEnrollmentStatus, nullable=False)
    enrolled_at = db.Column(db.DateTime, nullable=False)
    approved_at = db.Column(db.DateTime, nullable=True)
    rejected_at = db.Column(db.DateTime, nullable=True)
    cancelled_at = db.Column(db.DateTime, nullable=True)
    completed_at = db.Column(db.DateTime, nullable=True)
    data_retention_until = db.Column(db.DateTime, nullable=False)

    @classmethod
    def anonymize(cls, session_enrollment, anonymous_user_id, withdrawal_date):
        session = session_enrollment.session
        source_status = (session_enrollment.status or "").upper()
        status = cls.map_status(
            source_status,
            SESSION_ENROLLMENT_STATUS_MAP,
            AnonymizedEnrollmentStatus.PENDING,
        )

        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.original_session_enrollment_id = session_enrollment.id
        anonymized.session_id = session_enrollment.session_id
        anonymized.class_id = session.class_id
        anonymized.academy_id = session.class_.academy_id
        anonymized.session_date = session.date
        anonymized.status = status
        anonymized.enrolled_at = session_enrollment.enrolled_at
        # the live schema keeps no approval/completion time, enrolled_at stands in
        anonymized.approved_at = (
            session_enrollment.enrolled_at
            if source_status in APPROVED_SOURCE_STATUSES
            and not session_enrollment.rejected_at
            else None
        )
        anonymized.rejected_at = session_enrollment.rejected_at
        anonymized.cancelled_at = session_enrollment.cancelled_at
        anonymized.completed_at = (
            session_enrollment.enrolled_at
            if status == AnonymizedEnrollmentStatus.COMPLETED
            else None
        )
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )

        return anonymized
