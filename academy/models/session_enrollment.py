from enum import Enum

from academy import db
from academy.models.base import BaseModel


class SessionEnrollmentStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    CANCELLED = "CANCELLED"
    ATTENDED = "ATTENDED"
    ABSENT = "ABSENT"
    REFUND_REQUESTED = "REFUND_REQUESTED"


class SessionEnrollment(BaseModel):
    __tablename__ = "session_enrollment"

    student_id = db.Column(
        db.Integer, db.ForeignKey("student.id"), nullable=False, index=True
    )
    student = db.relationship("Student")
    session_id = db.Column(
        db.Integer, db.ForeignKey("class_session.id"), nullable=False, index=True
    )
    session = db.relationship("ClassSession", back_populates="enrollments")

    # legacy rows may hold values outside SessionEnrollmentStatus
    status = db.Column(
        db.String(30),
        nullable=False,
        default=SessionEnrollmentStatus.PENDING.value,
    )
    enrolled_at = db.Column(db.DateTime, nullable=False)
    rejected_at = db.Column(db.DateTime, nullable=True)
    cancelled_at = db.Column(db.DateTime, nullable=True)

    payment = db.relationship(
        "Payment", back_populates="session_enrollment", uselist=False
    )
