from academy import db
from academy.models.base import BaseModel


class Student(BaseModel):
    __tablename__ = "student"

    user_ref_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False
    )
    user = db.relationship("User")

    user_id = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    phone_number = db.Column(db.String(30), nullable=True)
    emergency_contact = db.Column(db.String(30), nullable=True)
    birth_date = db.Column(db.Date, nullable=True)
    notes = db.Column(db.Text, nullable=True)

    refund_account_holder = db.Column(db.String(255), nullable=True)
    refund_account_number = db.Column(db.String(255), nullable=True)
    refund_bank_name = db.Column(db.String(255), nullable=True)

    academy_links = db.relationship(
        "StudentAcademy", back_populates="student"
    )


class StudentAcademy(BaseModel):
    __tablename__ = "student_academy"

    student_id = db.Column(
        db.Integer, db.ForeignKey("student.id"), nullable=False, index=True
    )
    student = db.relationship("Student", back_populates="academy_links")
    academy_id = db.Column(
        db.Integer, db.ForeignKey("academy.id"), nullable=False, index=True
    )
    academy = db.relationship("Academy", back_populates="student_links")

    __table_args__ = (
        db.UniqueConstraint(
            "student_id", "academy_id", name="uq_student_academy"
        ),
    )
