from academy import db
from academy.models.base import BaseModel


class RefundRequest(BaseModel):
    __tablename__ = "refund_request"

    session_enrollment_id = db.Column(
        db.Integer,
        db.ForeignKey("session_enrollment.id"),
        nullable=False,
        index=True,
    )
    session_enrollment = db.relationship("SessionEnrollment")
    student_id = db.Column(
        db.Integer, db.ForeignKey("student.id"), nullable=False, index=True
    )

    reason = db.Column(db.String(50), nullable=False)
    detailed_reason = db.Column(db.Text, nullable=True)
    refund_amount = db.Column(db.Numeric(12, 2), nullable=False)
    status = db.Column(db.String(30), nullable=False, default="PENDING")
    process_reason = db.Column(db.Text, nullable=True)
    actual_refund_amount = db.Column(db.Numeric(12, 2), nullable=True)

    processed_by = db.Column(
        db.Integer, db.ForeignKey("users.id"), nullable=True, index=True
    )
    processor = db.relationship("User")

    bank_name = db.Column(db.String(255), nullable=True)
    account_number = db.Column(db.String(255), nullable=True)
    account_holder = db.Column(db.String(255), nullable=True)

    requested_at = db.Column(db.DateTime, nullable=False)
    processed_at = db.Column(db.DateTime, nullable=True)
    cancelled_at = db.Column(db.DateTime, nullable=True)
