from academy import db
from academy.models.base import BaseModel


class Payment(BaseModel):
    __tablename__ = "payment"

    student_id = db.Column(
        db.Integer, db.ForeignKey("student.id"), nullable=False, index=True
    )
    session_enrollment_id = db.Column(
        db.Integer,
        db.ForeignKey("session_enrollment.id"),
        unique=True,
        nullable=False,
    )
    session_enrollment = db.relationship(
        "SessionEnrollment", back_populates="payment"
    )

    amount = db.Column(db.Numeric(12, 2), nullable=False)
    status = db.Column(db.String(30), nullable=False, default="PENDING")
    method = db.Column(db.String(30), nullable=False, default="BANK_TRANSFER")
    paid_at = db.Column(db.DateTime, nullable=True)
    receipt_number = db.Column(db.String(100), nullable=True)
    note = db.Column(db.Text, nullable=True)
