from decimal import Decimal

from academy import db
from .base import AnonymizedModel, ACTIVITY_RETENTION_YEARS

CLASS_OPERATION = "CLASS_OPERATION"


class AnonymizedTeacherActivity(AnonymizedModel):
    __tablename__ = "anon_teacher_activity"

    retention_years = ACTIVITY_RETENTION_YEARS
    natural_key = ("anonymous_user_id", "class_id")

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    activity_type = db.Column(
        db.String(30), nullable=False, default=CLASS_OPERATION
    )
    class_id = db.Column(db.Integer, nullable=False)
    class_name = db.Column(db.String(255), nullable=False)
    academy_id = db.Column(db.Integer, nullable=False)
    tuition_fee = db.Column(db.Numeric(12, 2), nullable=False)
    operation_start_date = db.Column(db.Date, nullable=False)
    operation_end_date = db.Column(db.Date, nullable=False)
    total_sessions = db.Column(db.Integer, nullable=False, default=0)
    total_enrollments = db.Column(db.Integer, nullable=False, default=0)
    total_revenue = db.Column(db.Numeric(14, 2), nullable=False, default=0)
    data_retention_until = db.Column(db.DateTime, nullable=False)

    __table_args__ = (
        db.UniqueConstraint(
            "anonymous_user_id",
            "class_id",
            name="uq_anon_teacher_activity_class",
        ),
    )

    @classmethod
    def anonymize(cls, class_, anonymous_user_id, withdrawal_date):
        enrollments = [
            enrollment
            for session in class_.sessions
            for enrollment in session.enrollments
        ]
        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.activity_type = CLASS_OPERATION
        anonymized.class_id = class_.id
        anonymized.class_name = class_.class_name
        anonymized.academy_id = class_.academy_id
        anonymized.tuition_fee = class_.tuition_fee
        anonymized.operation_start_date = class_.start_date
        anonymized.operation_end_date = class_.end_date
        anonymized.total_sessions = len(class_.sessions)
        anonymized.total_enrollments = len(enrollments)
        anonymized.total_revenue = sum(
            (e.payment.amount for e in enrollments if e.payment),
            Decimal(0),
        )
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )

        return anonymized
