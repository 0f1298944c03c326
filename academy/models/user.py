from enum import Enum

from werkzeug.security import check_password_hash

from academy import db
from academy.helpers.db import enum_column
from academy.models.base import BaseModel


class UserRole(str, Enum):
    STUDENT = "STUDENT"
    TEACHER = "TEACHER"
    PRINCIPAL = "PRINCIPAL"


class User(BaseModel):
    __tablename__ = "users"

    user_id = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    role = enum_column(UserRole, nullable=False)

    def check_password(self, plain_text):
        return check_password_hash(self.password, plain_text)

    def __repr__(self):
        return f"<User [{self.id}] {self.role.value}>"
