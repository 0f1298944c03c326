from datetime import datetime
from unittest.mock import patch

from freezegun import freeze_time

from academy import db
from academy.helpers.errors import InvalidWithdrawalRoleError, NotFoundError
from academy.models import Student, User, UserRole, WithdrawalHistory
from academy.models.anonymized import (
    AnonymizedAttendance,
    AnonymizedPayment,
    AnonymizedRefund,
    AnonymizedSessionEnrollment,
    AnonymizedUser,
)
from academy.seed.factories import (
    AttendanceFactory,
    ClassFactory,
    ClassSessionFactory,
    PaymentFactory,
    RefundRequestFactory,
    SessionEnrollmentFactory,
    StudentFactory,
    TeacherFactory,
)
from academy.services.withdrawal import withdraw
from academy.services.withdrawal.masking_rules import WITHDRAWN_NAME
from academy.services.withdrawal.migrators import EntityMigrator
from academy.tests import BaseTest


@freeze_time("2024-05-10 12:00:00")
class TestStudentWithdrawal(BaseTest):
    def setUp(self):
        super().setUp()
        self.student = StudentFactory.create()
        self.user = self.student.user
        self.original_password = self.user.password

        class_ = ClassFactory.create()
        session = ClassSessionFactory.create(class_=class_)
        enrollment = SessionEnrollmentFactory.create(
            student=self.student, session=session
        )
        PaymentFactory.create(session_enrollment=enrollment)
        RefundRequestFactory.create(
            session_enrollment=enrollment,
            student_id=self.student.id,
            status="REJECTED",
        )
        AttendanceFactory.create(
            class_=class_,
            student_id=self.student.id,
            session_enrollment_id=enrollment.id,
        )

    def test_history_is_retained_and_live_rows_masked(self):
        result = withdraw(UserRole.STUDENT, self.user.id, "이사를 가게 되었습니다")
        db.session.expire_all()

        anonymized_user = AnonymizedUser.query.one()
        self.assertEqual(anonymized_user.anonymous_id, result.anonymous_id)
        self.assertTrue(result.anonymous_id.startswith("ANON_STUDENT_"))
        self.assertEqual(anonymized_user.original_user_role, UserRole.STUDENT)
        self.assertEqual(
            anonymized_user.withdrawal_date, datetime(2024, 5, 10, 12, 0)
        )
        self.assertEqual(
            anonymized_user.data_retention_until, datetime(2029, 5, 10, 12, 0)
        )
        self.assertEqual(anonymized_user.access_count, 0)

        for model in (
            AnonymizedPayment,
            AnonymizedRefund,
            AnonymizedSessionEnrollment,
            AnonymizedAttendance,
        ):
            row = model.query.one()
            self.assertEqual(row.anonymous_user_id, anonymized_user.id)
        self.assertEqual(
            AnonymizedAttendance.query.one().data_retention_until,
            datetime(2027, 5, 10, 12, 0),
        )
        self.assertEqual(
            result.migrated_counts,
            dict(session_enrollments=1, payments=1, refunds=1, attendances=1),
        )

        user = db.session.get(User, self.user.id)
        self.assertEqual(user.user_id, f"WITHDRAWN_USER_{self.user.id}")
        self.assertEqual(user.name, WITHDRAWN_NAME)
        self.assertNotEqual(user.password, self.original_password)
        self.assertFalse(user.check_password("mybirthday"))

        student = db.session.get(Student, self.student.id)
        self.assertEqual(student.user_id, f"WITHDRAWN_STUDENT_{self.user.id}")
        self.assertEqual(student.name, WITHDRAWN_NAME)
        self.assertIsNone(student.phone_number)
        self.assertIsNone(student.emergency_contact)
        self.assertIsNone(student.birth_date)
        self.assertIsNone(student.notes)
        self.assertIsNone(student.refund_account_number)

        history = WithdrawalHistory.query.one()
        self.assertEqual(history.user_role, UserRole.STUDENT)
        self.assertEqual(history.user_name, "김민수")
        self.assertTrue(history.user_id.startswith("user"))
        self.assertEqual(history.reason, "이사를 가게 되었습니다")
        self.assertEqual(history.reason_category, "OTHER")

    def test_role_can_be_given_by_name(self):
        result = withdraw("student", self.user.id, None)
        self.assertEqual(result.role, UserRole.STUDENT)

    def test_student_without_history(self):
        other = StudentFactory.create()

        result = withdraw(UserRole.STUDENT, other.user.id, "")

        self.assertEqual(
            result.migrated_counts,
            dict(session_enrollments=0, payments=0, refunds=0, attendances=0),
        )
        self.assertEqual(AnonymizedUser.query.count(), 1)

    def test_failure_in_atomic_phase_rolls_everything_back(self):
        with patch.object(
            EntityMigrator,
            "migrate_attendances",
            side_effect=RuntimeError("attendance migration failed"),
        ):
            with self.assertRaises(RuntimeError) as context:
                withdraw(UserRole.STUDENT, self.user.id, "reason")
        self.assertEqual(
            str(context.exception), "attendance migration failed"
        )

        db.session.expire_all()
        self.assertEqual(AnonymizedUser.query.count(), 0)
        self.assertEqual(AnonymizedPayment.query.count(), 0)
        self.assertEqual(AnonymizedSessionEnrollment.query.count(), 0)
        self.assertEqual(WithdrawalHistory.query.count(), 0)
        user = db.session.get(User, self.user.id)
        self.assertEqual(user.name, "김민수")
        self.assertEqual(user.password, self.original_password)
        self.assertEqual(
            db.session.get(Student, self.student.id).phone_number,
            "010-1234-5678",
        )

    def test_unknown_user(self):
        with self.assertRaises(NotFoundError):
            withdraw(UserRole.STUDENT, 9999, None)

    def test_already_withdrawn_user_is_rejected(self):
        withdraw(UserRole.STUDENT, self.user.id, "졸업")

        with self.assertRaises(NotFoundError) as context:
            withdraw(UserRole.STUDENT, self.user.id, "졸업")
        self.assertEqual(context.exception.message, "이미 탈퇴한 사용자입니다.")

        db.session.expire_all()
        self.assertEqual(AnonymizedUser.query.count(), 1)
        history = WithdrawalHistory.query.one()
        self.assertEqual(history.user_name, "김민수")

    def test_role_mismatch(self):
        teacher = TeacherFactory.create()

        with self.assertRaises(NotFoundError) as context:
            withdraw(UserRole.STUDENT, teacher.user.id, None)
        self.assertEqual(context.exception.message, "학생 정보를 찾을 수 없습니다.")
        self.assertEqual(AnonymizedUser.query.count(), 0)

    def test_invalid_role(self):
        with self.assertRaises(InvalidWithdrawalRoleError):
            withdraw("ADMIN", self.user.id, None)
