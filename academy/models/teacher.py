from academy import db
from academy.models.base import BaseModel


class Teacher(BaseModel):
    __tablename__ = "teacher"

    user_ref_id = db.Column(
        db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False
    )
    user = db.relationship("User")

    user_id = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    phone_number = db.Column(db.String(30), nullable=True)
    introduction = db.Column(db.Text, nullable=True)
    photo_url = db.Column(db.String(500), nullable=True)
    education = db.Column(db.JSON, nullable=False, default=list)
    specialties = db.Column(db.JSON, nullable=False, default=list)
    certifications = db.Column(db.JSON, nullable=False, default=list)
    years_of_experience = db.Column(db.Integer, nullable=True)
    available_times = db.Column(db.JSON, nullable=True)

    academy_id = db.Column(
        db.Integer, db.ForeignKey("academy.id"), nullable=True, index=True
    )
    academy = db.relationship("Academy", back_populates="teachers")
    classes = db.relationship("Class", back_populates="teacher")
