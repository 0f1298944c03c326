from decimal import Decimal
from enum import Enum

from academy import db
from academy.helpers.anonymization import (
    anonymize_account_number,
    anonymize_name,
    anonymize_text,
)
from academy.helpers.db import enum_column
from .base import AnonymizedModel, ACTIVITY_RETENTION_YEARS


class PrincipalActivityType(str, Enum):
    ACADEMY_OPERATION = "ACADEMY_OPERATION"
    REFUND_PROCESS = "REFUND_PROCESS"
    ENROLLMENT_REJECTION = "ENROLLMENT_REJECTION"
    TEACHER_MANAGEMENT = "TEACHER_MANAGEMENT"


class AnonymizedPrincipalActivity(AnonymizedModel):
    __tablename__ = "anon_principal_activity"

    retention_years = ACTIVITY_RETENTION_YEARS
    natural_key = ("anonymous_user_id", "source_reference")

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    activity_type = enum_column(PrincipalActivityType, nullable=False)
    # "<ENTITY>:<id>" of the record the row was built from
    source_reference = db.Column(db.String(100), nullable=False)

    academy_id = db.Column(db.Integer, nullable=True)
    academy_name = db.Column(db.String(255), nullable=True)
    academy_code = db.Column(db.String(20), nullable=True)
    operation_start_date = db.Column(db.DateTime, nullable=True)
    operation_end_date = db.Column(db.DateTime, nullable=True)
    total_classes = db.Column(db.Integer, nullable=True)
    total_teachers = db.Column(db.Integer, nullable=True)
    total_students = db.Column(db.Integer, nullable=True)
    total_revenue = db.Column(db.Numeric(14, 2), nullable=True)

    account_holder_masked = db.Column(db.String(255), nullable=True)
    account_number_masked = db.Column(db.String(255), nullable=True)
    bank_name = db.Column(db.String(255), nullable=True)

    processed_entity_type = db.Column(db.String(50), nullable=True)
    processed_entity_id = db.Column(db.Integer, nullable=True)
    process_action = db.Column(db.String(30), nullable=True)
    process_reason = db.Column(db.Text, nullable=True)
    processed_amount = db.Column(db.Numeric(12, 2), nullable=True)
    processed_at = db.Column(db.DateTime, nullable=True)

    managed_teacher_id = db.Column(db.Integer, nullable=True)
    management_action = db.Column(db.String(30), nullable=True)
    managed_at = db.Column(db.DateTime, nullable=True)

    data_retention_until = db.Column(db.DateTime, nullable=False)

    __table_args__ = (
        db.UniqueConstraint(
            "anonymous_user_id",
            "source_reference",
            name="uq_anon_principal_activity_source",
        ),
    )

    @classmethod
    def _new(cls, activity_type, source_reference, anonymous_user_id, withdrawal_date):
        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.activity_type = activity_type
        anonymized.source_reference = source_reference
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )
        return anonymized

    @classmethod
    def anonymize_academy(
        cls,
        academy,
        classes,
        teacher_count,
        student_count,
        principal,
        anonymous_user_id,
        withdrawal_date,
    ):
        anonymized = cls._new(
            PrincipalActivityType.ACADEMY_OPERATION,
            f"ACADEMY:{academy.id}",
            anonymous_user_id,
            withdrawal_date,
        )
        anonymized.academy_id = academy.id
        anonymized.academy_name = academy.name
        anonymized.academy_code = academy.code
        anonymized.operation_start_date = academy.creation_time
        anonymized.operation_end_date = withdrawal_date
        anonymized.total_classes = len(classes)
        anonymized.total_teachers = teacher_count
        anonymized.total_students = student_count
        anonymized.total_revenue = sum(
            (
                enrollment.payment.amount
                for class_ in classes
                for session in class_.sessions
                for enrollment in session.enrollments
                if enrollment.payment
            ),
            Decimal(0),
        )
        anonymized.account_holder_masked = (
            anonymize_name(principal.account_holder)
            if principal.account_holder
            else None
        )
        anonymized.account_number_masked = (
            anonymize_account_number(principal.account_number)
            if principal.account_number
            else None
        )
        anonymized.bank_name = principal.bank_name

        return anonymized

    @classmethod
    def anonymize_refund_process(cls, refund, anonymous_user_id, withdrawal_date):
        anonymized = cls._new(
            PrincipalActivityType.REFUND_PROCESS,
            f"REFUND_REQUEST:{refund.id}",
            anonymous_user_id,
            withdrawal_date,
        )
        anonymized.processed_entity_type = "REFUND_REQUEST"
        anonymized.processed_entity_id = refund.id
        anonymized.process_action = refund.status
        anonymized.process_reason = anonymize_text(refund.process_reason)
        anonymized.processed_amount = (
            refund.actual_refund_amount
            if refund.actual_refund_amount is not None
            else refund.refund_amount
        )
        anonymized.processed_at = refund.processed_at

        return anonymized

    @classmethod
    def anonymize_rejection(cls, rejection, anonymous_user_id, withdrawal_date):
        anonymized = cls._new(
            PrincipalActivityType.ENROLLMENT_REJECTION,
            f"REJECTION:{rejection.id}",
            anonymous_user_id,
            withdrawal_date,
        )
        anonymized.processed_entity_type = rejection.entity_type
        anonymized.processed_entity_id = rejection.entity_id
        anonymized.process_action = "REJECTED"
        anonymized.process_reason = anonymize_text(
            rejection.detailed_reason or rejection.reason
        )
        anonymized.processed_at = rejection.rejected_at

        return anonymized

    @classmethod
    def anonymize_teacher_management(
        cls, teacher, anonymous_user_id, withdrawal_date
    ):
        anonymized = cls._new(
            PrincipalActivityType.TEACHER_MANAGEMENT,
            f"TEACHER:{teacher.id}",
            anonymous_user_id,
            withdrawal_date,
        )
        anonymized.managed_teacher_id = teacher.id
        anonymized.management_action = "TEACHER_ADDED"
        anonymized.managed_at = teacher.creation_time

        return anonymized
