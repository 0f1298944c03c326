from academy import db
from academy.helpers.db import enum_column
from academy.models.user import UserRole
from .base import AnonymizedModel, ACTIVITY_RETENTION_YEARS


class AnonymizedUser(AnonymizedModel):
    __tablename__ = "anon_user"

    retention_years = ACTIVITY_RETENTION_YEARS

    id = db.Column(db.Integer, primary_key=True)
    anonymous_id = db.Column(db.String(100), nullable=False)
    original_user_role = enum_column(UserRole, nullable=False)
    withdrawal_date = db.Column(db.DateTime, nullable=False)
    data_retention_until = db.Column(db.DateTime, nullable=False)
    access_count = db.Column(db.Integer, nullable=False, default=0)
    last_accessed_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("anonymous_id", name="uq_anon_user_anonymous_id"),
        db.CheckConstraint(
            "data_retention_until > withdrawal_date",
            name="anon_user_retention_after_withdrawal",
        ),
    )

    @classmethod
    def anonymize(cls, anonymous_id, role, withdrawal_date):
        anonymized = cls()
        anonymized.anonymous_id = anonymous_id
        anonymized.original_user_role = role
        anonymized.withdrawal_date = withdrawal_date
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )
        anonymized.access_count = 0
        anonymized.last_accessed_at = None

        return anonymized
