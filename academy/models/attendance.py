from academy import db
from academy.models.base import BaseModel


class Attendance(BaseModel):
    __tablename__ = "attendance"

    session_enrollment_id = db.Column(
        db.Integer, db.ForeignKey("session_enrollment.id"), nullable=True
    )
    class_id = db.Column(
        db.Integer, db.ForeignKey("class.id"), nullable=False, index=True
    )
    class_ = db.relationship("Class")
    student_id = db.Column(
        db.Integer, db.ForeignKey("student.id"), nullable=False, index=True
    )

    date = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(30), nullable=False, default="PRESENT")
    note = db.Column(db.Text, nullable=True)
