from enum import Enum

from academy import db
from academy.helpers.db import enum_column
from academy.helpers.anonymization import anonymize_text
from .base import AnonymizedModel, ATTENDANCE_RETENTION_YEARS


class AnonymizedAttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"


ATTENDANCE_STATUS_MAP = {
    status.value: status for status in AnonymizedAttendanceStatus
}


class AnonymizedAttendance(AnonymizedModel):
    __tablename__ = "anon_attendance"

    retention_years = ATTENDANCE_RETENTION_YEARS
    natural_key = ("original_attendance_id",)

    id = db.Column(db.Integer, primary_key=True)
    anonymous_user_id = db.Column(
        db.Integer, db.ForeignKey("anon_user.id"), nullable=False, index=True
    )
    original_attendance_id = db.Column(db.Integer, unique=True, nullable=False)
    session_enrollment_reference = db.Column(db.String(50), nullable=True)
    class_id = db.Column(db.Integer, nullable=False)
    academy_id = db.Column(db.Integer, nullable=False)
    attendance_date = db.Column(db.Date, nullable=False)
    status = enum_column(AnonymizedAttendanceStatus, nullable=False)
    note = db.Column(db.Text, nullable=True)
    data_retention_until = db.Column(db.DateTime, nullable=False)

    @classmethod
    def anonymize(cls, attendance, anonymous_user_id, withdrawal_date):
        anonymized = cls()
        anonymized.anonymous_user_id = anonymous_user_id
        anonymized.original_attendance_id = attendance.id
        anonymized.session_enrollment_reference = (
            str(attendance.session_enrollment_id)
            if attendance.session_enrollment_id
            else None
        )
        anonymized.class_id = attendance.class_id
        anonymized.academy_id = attendance.class_.academy_id
        anonymized.attendance_date = attendance.date
        anonymized.status = cls.map_status(
            attendance.status,
            ATTENDANCE_STATUS_MAP,
            AnonymizedAttendanceStatus.ABSENT,
        )
        anonymized.note = anonymize_text(attendance.note)
        anonymized.data_retention_until = cls.compute_retention_date(
            withdrawal_date
        )

        return anonymized
