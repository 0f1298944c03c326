from academy import db
from academy.models.base import BaseModel


class Academy(BaseModel):
    __tablename__ = "academy"

    name = db.Column(db.String(255), nullable=False)
    phone_number = db.Column(db.String(30), nullable=True)
    address = db.Column(db.String(500), nullable=True)
    description = db.Column(db.Text, nullable=True)
    code = db.Column(db.String(20), unique=True, nullable=False)

    classes = db.relationship("Class", back_populates="academy")
    teachers = db.relationship("Teacher", back_populates="academy")
    student_links = db.relationship("StudentAcademy", back_populates="academy")

    def __repr__(self):
        return f"<Academy [{self.id}] {self.code}>"
