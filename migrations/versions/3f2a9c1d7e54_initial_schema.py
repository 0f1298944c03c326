"""initial schema

Revision ID: 3f2a9c1d7e54
Revises:
Create Date: 2024-04-02 10:21:47.318204

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3f2a9c1d7e54"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=9), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_table(
        "academy",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("code", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )
    op.create_table(
        "student",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_ref_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("emergency_contact", sa.String(length=30), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "refund_account_holder", sa.String(length=255), nullable=True
        ),
        sa.Column(
            "refund_account_number", sa.String(length=255), nullable=True
        ),
        sa.Column("refund_bank_name", sa.String(length=255), nullable=True),
        sa.ForeignKeyConstraint(["user_ref_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("user_ref_id"),
    )
    op.create_table(
        "student_academy",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["academy_id"], ["academy.id"]),
        sa.ForeignKeyConstraint(["student_id"], ["student.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "student_id", "academy_id", name="uq_student_academy"
        ),
    )
    op.create_index(
        op.f("ix_student_academy_academy_id"),
        "student_academy",
        ["academy_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_student_academy_student_id"),
        "student_academy",
        ["student_id"],
        unique=False,
    )
    op.create_table(
        "teacher",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_ref_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("introduction", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.String(length=500), nullable=True),
        sa.Column("education", sa.JSON(), nullable=False),
        sa.Column("specialties", sa.JSON(), nullable=False),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("available_times", sa.JSON(), nullable=True),
        sa.Column("academy_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["academy_id"], ["academy.id"]),
        sa.ForeignKeyConstraint(["user_ref_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("user_ref_id"),
    )
    op.create_index(
        op.f("ix_teacher_academy_id"), "teacher", ["academy_id"], unique=False
    )
    op.create_table(
        "principal",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_ref_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("introduction", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.String(length=500), nullable=True),
        sa.Column("education", sa.JSON(), nullable=False),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("years_of_experience", sa.Integer(), nullable=True),
        sa.Column("account_holder", sa.String(length=255), nullable=True),
        sa.Column("account_number", sa.String(length=255), nullable=True),
        sa.Column("bank_name", sa.String(length=255), nullable=True),
        sa.Column("academy_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["academy_id"], ["academy.id"]),
        sa.ForeignKeyConstraint(["user_ref_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("academy_id"),
        sa.UniqueConstraint("user_id"),
        sa.UniqueConstraint("user_ref_id"),
    )
    op.create_table(
        "class",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("class_name", sa.String(length=255), nullable=False),
        sa.Column("class_code", sa.String(length=50), nullable=True),
        sa.Column(
            "tuition_fee", sa.Numeric(precision=12, scale=2), nullable=False
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.Column("teacher_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["academy_id"], ["academy.id"]),
        sa.ForeignKeyConstraint(["teacher_id"], ["teacher.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("class_code"),
    )
    op.create_index(
        op.f("ix_class_academy_id"), "class", ["academy_id"], unique=False
    )
    op.create_index(
        op.f("ix_class_teacher_id"), "class", ["teacher_id"], unique=False
    )
    op.create_table(
        "class_session",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("class_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["class_id"], ["class.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_class_session_class_id"),
        "class_session",
        ["class_id"],
        unique=False,
    )
    op.create_table(
        "session_enrollment",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("enrolled_at", sa.DateTime(), nullable=False),
        sa.Column("rejected_at", sa.DateTime(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["session_id"], ["class_session.id"]),
        sa.ForeignKeyConstraint(["student_id"], ["student.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_session_enrollment_session_id"),
        "session_enrollment",
        ["session_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_session_enrollment_student_id"),
        "session_enrollment",
        ["student_id"],
        unique=False,
    )
    op.create_table(
        "payment",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("session_enrollment_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("method", sa.String(length=30), nullable=False),
        sa.Column("paid_at", sa.DateTime(), nullable=True),
        sa.Column("receipt_number", sa.String(length=100), nullable=True),
        sa.Column("note", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["session_enrollment_id"], ["session_enrollment.id"]
        ),
        sa.ForeignKeyConstraint(["student_id"], ["student.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_enrollment_id"),
    )
    op.create_index(
        op.f("ix_payment_student_id"), "payment", ["student_id"], unique=False
    )
    op.create_table(
        "refund_request",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("session_enrollment_id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(length=50), nullable=False),
        sa.Column("detailed_reason", sa.Text(), nullable=True),
        sa.Column(
            "refund_amount", sa.Numeric(precision=12, scale=2), nullable=False
        ),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("process_reason", sa.Text(), nullable=True),
        sa.Column(
            "actual_refund_amount",
            sa.Numeric(precision=12, scale=2),
            nullable=True,
        ),
        sa.Column("processed_by", sa.Integer(), nullable=True),
        sa.Column("bank_name", sa.String(length=255), nullable=True),
        sa.Column("account_number", sa.String(length=255), nullable=True),
        sa.Column("account_holder", sa.String(length=255), nullable=True),
        sa.Column("requested_at", sa.DateTime(), nullable=False),
        sa.Column("processed_at", sa.DateTime(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["processed_by"], ["users.id"]),
        sa.ForeignKeyConstraint(
            ["session_enrollment_id"], ["session_enrollment.id"]
        ),
        sa.ForeignKeyConstraint(["student_id"], ["student.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_refund_request_processed_by"),
        "refund_request",
        ["processed_by"],
        unique=False,
    )
    op.create_index(
        op.f("ix_refund_request_session_enrollment_id"),
        "refund_request",
        ["session_enrollment_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_refund_request_student_id"),
        "refund_request",
        ["student_id"],
        unique=False,
    )
    op.create_table(
        "attendance",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("session_enrollment_id", sa.Integer(), nullable=True),
        sa.Column("class_id", sa.Integer(), nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["class_id"], ["class.id"]),
        sa.ForeignKeyConstraint(
            ["session_enrollment_id"], ["session_enrollment.id"]
        ),
        sa.ForeignKeyConstraint(["student_id"], ["student.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_attendance_class_id"), "attendance", ["class_id"], unique=False
    )
    op.create_index(
        op.f("ix_attendance_student_id"),
        "attendance",
        ["student_id"],
        unique=False,
    )
    op.create_table(
        "rejection_detail",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("rejection_type", sa.String(length=50), nullable=False),
        sa.Column("entity_type", sa.String(length=50), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(length=255), nullable=False),
        sa.Column("detailed_reason", sa.Text(), nullable=True),
        sa.Column("rejected_by", sa.Integer(), nullable=False),
        sa.Column("rejected_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["rejected_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_rejection_detail_rejected_by"),
        "rejection_detail",
        ["rejected_by"],
        unique=False,
    )
    op.create_table(
        "withdrawal_history",
        sa.Column("creation_time", sa.DateTime(), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("user_role", sa.String(length=9), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("reason_category", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_withdrawal_history_user_id"),
        "withdrawal_history",
        ["user_id"],
        unique=False,
    )

    op.create_table(
        "anon_user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_id", sa.String(length=100), nullable=False),
        sa.Column("original_user_role", sa.String(length=9), nullable=False),
        sa.Column("withdrawal_date", sa.DateTime(), nullable=False),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.Column("access_count", sa.Integer(), nullable=False),
        sa.Column("last_accessed_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "data_retention_until > withdrawal_date",
            name="anon_user_retention_after_withdrawal",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("anonymous_id", name="uq_anon_user_anonymous_id"),
    )
    op.create_table(
        "anon_payment",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column("original_payment_id", sa.Integer(), nullable=False),
        sa.Column(
            "session_enrollment_reference", sa.String(length=50), nullable=True
        ),
        sa.Column("academy_id", sa.Integer(), nullable=True),
        sa.Column("class_id", sa.Integer(), nullable=True),
        sa.Column("amount", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("status", sa.String(length=9), nullable=False),
        sa.Column("method", sa.String(length=30), nullable=True),
        sa.Column("paid_at", sa.DateTime(), nullable=True),
        sa.Column("receipt_number", sa.String(length=100), nullable=True),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("original_payment_id"),
    )
    op.create_index(
        op.f("ix_anon_payment_anonymous_user_id"),
        "anon_payment",
        ["anonymous_user_id"],
        unique=False,
    )
    op.create_table(
        "anon_refund",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column("original_refund_request_id", sa.Integer(), nullable=False),
        sa.Column(
            "session_enrollment_reference",
            sa.String(length=50),
            nullable=False,
        ),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.Column("class_id", sa.Integer(), nullable=True),
        sa.Column("reason", sa.String(length=50), nullable=False),
        sa.Column("detailed_reason", sa.Text(), nullable=True),
        sa.Column(
            "requested_amount",
            sa.Numeric(precision=12, scale=2),
            nullable=False,
        ),
        sa.Column(
            "actual_refund_amount",
            sa.Numeric(precision=12, scale=2),
            nullable=True,
        ),
        sa.Column("status", sa.String(length=9), nullable=False),
        sa.Column("process_reason", sa.Text(), nullable=True),
        sa.Column("processed_by_role", sa.String(length=20), nullable=True),
        sa.Column("requested_at", sa.DateTime(), nullable=False),
        sa.Column("processed_at", sa.DateTime(), nullable=True),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("original_refund_request_id"),
    )
    op.create_index(
        op.f("ix_anon_refund_anonymous_user_id"),
        "anon_refund",
        ["anonymous_user_id"],
        unique=False,
    )
    op.create_table(
        "anon_session_enrollment",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column(
            "original_session_enrollment_id", sa.Integer(), nullable=False
        ),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("class_id", sa.Integer(), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=9), nullable=False),
        sa.Column("enrolled_at", sa.DateTime(), nullable=False),
        sa.Column("approved_at", sa.DateTime(), nullable=True),
        sa.Column("rejected_at", sa.DateTime(), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("original_session_enrollment_id"),
    )
    op.create_index(
        op.f("ix_anon_session_enrollment_anonymous_user_id"),
        "anon_session_enrollment",
        ["anonymous_user_id"],
        unique=False,
    )
    op.create_table(
        "anon_attendance",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column("original_attendance_id", sa.Integer(), nullable=False),
        sa.Column(
            "session_enrollment_reference", sa.String(length=50), nullable=True
        ),
        sa.Column("class_id", sa.Integer(), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.Column("attendance_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(length=7), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("original_attendance_id"),
    )
    op.create_index(
        op.f("ix_anon_attendance_anonymous_user_id"),
        "anon_attendance",
        ["anonymous_user_id"],
        unique=False,
    )
    op.create_table(
        "anon_teacher_activity",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column("activity_type", sa.String(length=30), nullable=False),
        sa.Column("class_id", sa.Integer(), nullable=False),
        sa.Column("class_name", sa.String(length=255), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=False),
        sa.Column(
            "tuition_fee", sa.Numeric(precision=12, scale=2), nullable=False
        ),
        sa.Column("operation_start_date", sa.Date(), nullable=False),
        sa.Column("operation_end_date", sa.Date(), nullable=False),
        sa.Column("total_sessions", sa.Integer(), nullable=False),
        sa.Column("total_enrollments", sa.Integer(), nullable=False),
        sa.Column(
            "total_revenue", sa.Numeric(precision=14, scale=2), nullable=False
        ),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "anonymous_user_id",
            "class_id",
            name="uq_anon_teacher_activity_class",
        ),
    )
    op.create_index(
        op.f("ix_anon_teacher_activity_anonymous_user_id"),
        "anon_teacher_activity",
        ["anonymous_user_id"],
        unique=False,
    )
    op.create_table(
        "anon_principal_activity",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("anonymous_user_id", sa.Integer(), nullable=False),
        sa.Column("activity_type", sa.String(length=20), nullable=False),
        sa.Column("source_reference", sa.String(length=100), nullable=False),
        sa.Column("academy_id", sa.Integer(), nullable=True),
        sa.Column("academy_name", sa.String(length=255), nullable=True),
        sa.Column("academy_code", sa.String(length=20), nullable=True),
        sa.Column("operation_start_date", sa.DateTime(), nullable=True),
        sa.Column("operation_end_date", sa.DateTime(), nullable=True),
        sa.Column("total_classes", sa.Integer(), nullable=True),
        sa.Column("total_teachers", sa.Integer(), nullable=True),
        sa.Column("total_students", sa.Integer(), nullable=True),
        sa.Column(
            "total_revenue", sa.Numeric(precision=14, scale=2), nullable=True
        ),
        sa.Column(
            "account_holder_masked", sa.String(length=255), nullable=True
        ),
        sa.Column(
            "account_number_masked", sa.String(length=255), nullable=True
        ),
        sa.Column("bank_name", sa.String(length=255), nullable=True),
        sa.Column(
            "processed_entity_type", sa.String(length=50), nullable=True
        ),
        sa.Column("processed_entity_id", sa.Integer(), nullable=True),
        sa.Column("process_action", sa.String(length=30), nullable=True),
        sa.Column("process_reason", sa.Text(), nullable=True),
        sa.Column(
            "processed_amount",
            sa.Numeric(precision=12, scale=2),
            nullable=True,
        ),
        sa.Column("processed_at", sa.DateTime(), nullable=True),
        sa.Column("managed_teacher_id", sa.Integer(), nullable=True),
        sa.Column("management_action", sa.String(length=30), nullable=True),
        sa.Column("managed_at", sa.DateTime(), nullable=True),
        sa.Column("data_retention_until", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["anonymous_user_id"], ["anon_user.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "anonymous_user_id",
            "source_reference",
            name="uq_anon_principal_activity_source",
        ),
    )
    op.create_index(
        op.f("ix_anon_principal_activity_anonymous_user_id"),
        "anon_principal_activity",
        ["anonymous_user_id"],
        unique=False,
    )


def downgrade():
    for table in (
        "anon_principal_activity",
        "anon_teacher_activity",
        "anon_attendance",
        "anon_session_enrollment",
        "anon_refund",
        "anon_payment",
        "anon_user",
        "withdrawal_history",
        "rejection_detail",
        "attendance",
        "refund_request",
        "payment",
        "session_enrollment",
        "class_session",
        "class",
        "principal",
        "teacher",
        "student_academy",
        "student",
        "academy",
        "users",
    ):
        op.drop_table(table)
