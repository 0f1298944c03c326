from academy import db
from academy.helpers.db import enum_column
from academy.models.base import BaseModel
from academy.models.user import UserRole


class WithdrawalHistory(BaseModel):
    __tablename__ = "withdrawal_history"

    user_id = db.Column(db.String(255), nullable=False, index=True)
    user_name = db.Column(db.String(255), nullable=False)
    user_role = enum_column(UserRole, nullable=False)
    reason = db.Column(db.Text, nullable=True)
    reason_category = db.Column(db.String(50), nullable=False, default="OTHER")
