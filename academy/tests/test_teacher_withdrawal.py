from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

from freezegun import freeze_time

from academy import db
from academy.helpers.errors import HasOngoingClassesError
from academy.models import Teacher, User, WithdrawalHistory, UserRole
from academy.models.anonymized import AnonymizedTeacherActivity, AnonymizedUser
from academy.seed.factories import (
    AcademyFactory,
    ClassFactory,
    ClassSessionFactory,
    PaymentFactory,
    SessionEnrollmentFactory,
    TeacherFactory,
)
from academy.services.withdrawal import WithdrawalOrchestrator
from academy.services.withdrawal.masking_rules import WITHDRAWN_NAME
from academy.services.withdrawal.repositories import LiveRepository
from academy.tests import BaseTest

PHOTO_URL = "/uploads/teacher-photos/teacher.jpg"


@freeze_time("2024-05-10 12:00:00")
class TestTeacherWithdrawal(BaseTest):
    def setUp(self):
        super().setUp()
        self.academy = AcademyFactory.create()
        self.teacher = TeacherFactory.create(
            academy=self.academy, photo_url=PHOTO_URL
        )
        self.file_deleter = MagicMock(return_value=True)
        self.orchestrator = WithdrawalOrchestrator(
            file_deleter=self.file_deleter
        )

    def _class(self, end_date, **kwargs):
        return ClassFactory.create(
            academy=self.academy,
            teacher=self.teacher,
            start_date=date(2024, 1, 1),
            end_date=end_date,
            **kwargs,
        )

    def test_class_ending_tomorrow_blocks_withdrawal(self):
        class_ = self._class(date(2024, 5, 11))

        with self.assertRaises(HasOngoingClassesError) as context:
            self.orchestrator.withdraw(
                UserRole.TEACHER, self.teacher.user.id, None
            )

        error = context.exception
        self.assertEqual(error.extensions["code"], "HAS_ONGOING_CLASSES")
        self.assertEqual(error.extensions["ongoing_class_count"], 1)
        self.assertEqual(error.extensions["classes"][0]["id"], class_.id)
        self.assertEqual(error.message, "진행 중인 수업이 있어 탈퇴할 수 없습니다.")
        self.file_deleter.assert_not_called()
        self.assertEqual(AnonymizedUser.query.count(), 0)
        self.assertEqual(WithdrawalHistory.query.count(), 0)

    def test_class_ending_today_is_still_ongoing(self):
        self._class(date(2024, 5, 10))

        with self.assertRaises(HasOngoingClassesError):
            self.orchestrator.withdraw(
                UserRole.TEACHER, self.teacher.user.id, None
            )

    def test_finished_classes_are_kept_as_activities(self):
        class_ = self._class(date(2024, 5, 9), tuition_fee=Decimal("200000"))
        session = ClassSessionFactory.create(
            class_=class_, date=date(2024, 2, 1)
        )
        enrollment = SessionEnrollmentFactory.create(session=session)
        PaymentFactory.create(
            session_enrollment=enrollment, amount=Decimal("200000")
        )

        result = self.orchestrator.withdraw(
            "TEACHER", self.teacher.user.id, "은퇴"
        )
        db.session.expire_all()

        self.assertEqual(result.migrated_counts, dict(teacher_activities=1))
        self.assertTrue(result.photo_deleted)
        self.file_deleter.assert_called_once_with(PHOTO_URL)

        activity = AnonymizedTeacherActivity.query.one()
        self.assertEqual(activity.class_id, class_.id)
        self.assertEqual(activity.academy_id, self.academy.id)
        self.assertEqual(activity.tuition_fee, Decimal("200000"))
        self.assertEqual(activity.total_revenue, Decimal("200000"))
        self.assertEqual(activity.activity_type, "CLASS_OPERATION")

        teacher = db.session.get(Teacher, self.teacher.id)
        self.assertEqual(teacher.name, WITHDRAWN_NAME)
        self.assertIsNone(teacher.academy_id)
        self.assertIsNone(teacher.photo_url)
        self.assertIsNone(teacher.introduction)
        self.assertEqual(teacher.education, [])
        self.assertEqual(teacher.specialties, [])
        self.assertEqual(teacher.certifications, [])
        self.assertIsNone(teacher.available_times)

        user = db.session.get(User, self.teacher.user.id)
        self.assertEqual(user.user_id, f"WITHDRAWN_USER_{user.id}")

    def test_photo_deletion_failure_does_not_abort(self):
        self._class(date(2023, 12, 31))
        self.file_deleter.side_effect = OSError("disk unavailable")

        result = self.orchestrator.withdraw(
            UserRole.TEACHER, self.teacher.user.id, None
        )

        self.assertFalse(result.photo_deleted)
        self.assertEqual(AnonymizedUser.query.count(), 1)
        self.assertEqual(WithdrawalHistory.query.count(), 1)

    def test_photo_is_kept_when_atomic_phase_fails(self):
        self._class(date(2023, 12, 31))

        with patch.object(
            LiveRepository,
            "add_withdrawal_history",
            side_effect=RuntimeError("history insert failed"),
        ):
            with self.assertRaises(RuntimeError):
                self.orchestrator.withdraw(
                    UserRole.TEACHER, self.teacher.user.id, None
                )

        self.file_deleter.assert_not_called()
        db.session.expire_all()
        teacher = db.session.get(Teacher, self.teacher.id)
        self.assertEqual(teacher.photo_url, PHOTO_URL)
        self.assertEqual(AnonymizedUser.query.count(), 0)

    def test_teacher_without_photo(self):
        self.teacher.photo_url = None
        db.session.commit()

        result = self.orchestrator.withdraw(
            UserRole.TEACHER, self.teacher.user.id, None
        )

        self.file_deleter.assert_not_called()
        self.assertEqual(result.migrated_counts, dict(teacher_activities=0))
