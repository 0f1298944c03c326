from academy import db
from academy.models.base import BaseModel


class Class(BaseModel):
    __tablename__ = "class"

    class_name = db.Column(db.String(255), nullable=False)
    class_code = db.Column(db.String(50), unique=True, nullable=True)
    tuition_fee = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)

    academy_id = db.Column(
        db.Integer, db.ForeignKey("academy.id"), nullable=False, index=True
    )
    academy = db.relationship("Academy", back_populates="classes")
    teacher_id = db.Column(
        db.Integer, db.ForeignKey("teacher.id"), nullable=True, index=True
    )
    teacher = db.relationship("Teacher", back_populates="classes")

    sessions = db.relationship(
        "ClassSession", back_populates="class_", order_by="ClassSession.date"
    )


class ClassSession(BaseModel):
    __tablename__ = "class_session"

    class_id = db.Column(
        db.Integer, db.ForeignKey("class.id"), nullable=False, index=True
    )
    class_ = db.relationship("Class", back_populates="sessions")
    date = db.Column(db.Date, nullable=False)

    enrollments = db.relationship(
        "SessionEnrollment", back_populates="session"
    )
