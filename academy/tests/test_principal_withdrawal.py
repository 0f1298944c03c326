from datetime import date, datetime
from unittest.mock import MagicMock, patch

from freezegun import freeze_time

from academy import db
from academy.helpers.errors import (
    HasOngoingClassesError,
    HasPendingEnrollmentsError,
    HasPendingRefundsError,
    NotFoundError,
)
from academy.models import (
    Academy,
    Principal,
    StudentAcademy,
    Teacher,
    UserRole,
)
from academy.models.anonymized import (
    AnonymizedPrincipalActivity,
    AnonymizedUser,
    PrincipalActivityType,
)
from academy.seed.factories import (
    ClassFactory,
    ClassSessionFactory,
    PaymentFactory,
    PrincipalFactory,
    RefundRequestFactory,
    RejectionDetailFactory,
    SessionEnrollmentFactory,
    StudentAcademyFactory,
    TeacherFactory,
)
from academy.services.withdrawal import WithdrawalOrchestrator
from academy.services.withdrawal.masking_rules import (
    CLOSED_ACADEMY_NAME,
    masked_academy_data,
)
from academy.services.withdrawal.repositories import LiveRepository
from academy.tests import BaseTest


@freeze_time("2024-05-10 12:00:00")
class TestPrincipalWithdrawal(BaseTest):
    def setUp(self):
        super().setUp()
        self.principal = PrincipalFactory.create(
            photo_url="uploads/principal-photos/p.png"
        )
        self.academy = self.principal.academy
        self.teacher = TeacherFactory.create(academy=self.academy)
        self.student_link = StudentAcademyFactory.create(academy=self.academy)
        self.class_ = ClassFactory.create(
            academy=self.academy,
            teacher=self.teacher,
            start_date=date(2023, 9, 1),
            end_date=date(2024, 2, 28),
        )
        self.session = ClassSessionFactory.create(class_=self.class_)
        self.enrollment = SessionEnrollmentFactory.create(
            student=self.student_link.student, session=self.session
        )
        PaymentFactory.create(session_enrollment=self.enrollment)

        self.file_deleter = MagicMock(return_value=True)
        self.orchestrator = WithdrawalOrchestrator(
            file_deleter=self.file_deleter
        )

    def _withdraw(self):
        return self.orchestrator.withdraw(
            UserRole.PRINCIPAL, self.principal.user.id, "폐업"
        )

    def test_academy_is_closed_but_kept(self):
        RefundRequestFactory.create(
            session_enrollment=self.enrollment,
            student_id=self.student_link.student.id,
            status="COMPLETED",
            process_reason="환불 완료 010-1111-2222",
            processed_by=self.principal.user.id,
            processed_at=datetime(2024, 1, 10, 9, 0),
        )
        RejectionDetailFactory.create(
            rejected_by=self.principal.user.id,
            entity_id=self.enrollment.id,
            detailed_reason="정원 초과로 거절",
        )

        result = self._withdraw()
        db.session.expire_all()

        self.assertEqual(result.migrated_counts, dict(principal_activities=4))
        self.file_deleter.assert_called_once_with(
            "uploads/principal-photos/p.png"
        )

        academy = db.session.get(Academy, self.academy.id)
        self.assertIsNotNone(academy)
        for column, value in masked_academy_data().items():
            self.assertEqual(getattr(academy, column), value)
        self.assertEqual(academy.name, CLOSED_ACADEMY_NAME)
        self.assertEqual(academy.code, self.academy.code)

        self.assertEqual(
            StudentAcademy.query.filter_by(academy_id=self.academy.id).count(),
            0,
        )
        self.assertIsNone(db.session.get(Teacher, self.teacher.id).academy_id)

        principal = db.session.get(Principal, self.principal.id)
        self.assertIsNone(principal.account_number)
        self.assertIsNone(principal.account_holder)
        self.assertIsNone(principal.bank_name)
        self.assertIsNone(principal.email)
        self.assertIsNone(principal.photo_url)

        anonymized_user = AnonymizedUser.query.one()
        activities = {
            activity.activity_type: activity
            for activity in AnonymizedPrincipalActivity.query.filter_by(
                anonymous_user_id=anonymized_user.id
            )
        }
        self.assertEqual(
            set(activities),
            {
                PrincipalActivityType.ACADEMY_OPERATION,
                PrincipalActivityType.REFUND_PROCESS,
                PrincipalActivityType.ENROLLMENT_REJECTION,
                PrincipalActivityType.TEACHER_MANAGEMENT,
            },
        )

        operation = activities[PrincipalActivityType.ACADEMY_OPERATION]
        self.assertEqual(operation.academy_id, self.academy.id)
        self.assertNotEqual(operation.academy_name, CLOSED_ACADEMY_NAME)
        self.assertEqual(operation.total_classes, 1)
        self.assertEqual(operation.total_teachers, 1)
        self.assertEqual(operation.total_students, 1)
        self.assertEqual(operation.account_holder_masked, "박*준")
        self.assertEqual(operation.account_number_masked, "110-***-******")
        self.assertEqual(operation.operation_end_date, datetime(2024, 5, 10, 12, 0))

        refund = activities[PrincipalActivityType.REFUND_PROCESS]
        self.assertEqual(refund.process_action, "COMPLETED")
        self.assertEqual(refund.process_reason, "환불 완료 010-****-2222")

        rejection = activities[PrincipalActivityType.ENROLLMENT_REJECTION]
        self.assertEqual(rejection.process_action, "REJECTED")
        self.assertEqual(rejection.process_reason, "정원 초과로 거절")

        management = activities[PrincipalActivityType.TEACHER_MANAGEMENT]
        self.assertEqual(management.managed_teacher_id, self.teacher.id)
        self.assertEqual(management.management_action, "TEACHER_ADDED")

    def test_ongoing_class_blocks_withdrawal(self):
        ClassFactory.create(
            academy=self.academy,
            start_date=date(2024, 3, 1),
            end_date=date(2024, 6, 30),
        )

        with self.assertRaises(HasOngoingClassesError):
            self._withdraw()
        self.assertEqual(AnonymizedUser.query.count(), 0)

    def test_pending_refund_blocks_withdrawal(self):
        RefundRequestFactory.create(
            session_enrollment=self.enrollment,
            student_id=self.student_link.student.id,
            status="PENDING",
        )

        with self.assertRaises(HasPendingRefundsError) as context:
            self._withdraw()
        self.assertEqual(
            context.exception.extensions["pending_refund_count"], 1
        )
        self.file_deleter.assert_not_called()

    def test_pending_enrollment_blocks_withdrawal(self):
        SessionEnrollmentFactory.create(session=self.session, status="PENDING")

        with self.assertRaises(HasPendingEnrollmentsError) as context:
            self._withdraw()
        self.assertEqual(
            context.exception.extensions["pending_enrollment_count"], 1
        )

    def test_pending_refund_of_another_academy_is_ignored(self):
        other_enrollment = SessionEnrollmentFactory.create()
        RefundRequestFactory.create(
            session_enrollment=other_enrollment,
            student_id=other_enrollment.student.id,
            status="PENDING",
        )

        self._withdraw()

        self.assertEqual(AnonymizedUser.query.count(), 1)

    def test_refund_arriving_before_commit_is_caught(self):
        academy_name = self.academy.name
        with patch.object(
            LiveRepository,
            "count_pending_academy_refunds",
            side_effect=[0, 1],
        ):
            with self.assertRaises(HasPendingRefundsError):
                self._withdraw()

        db.session.expire_all()
        self.assertEqual(AnonymizedUser.query.count(), 0)
        self.assertEqual(
            db.session.get(Academy, self.academy.id).name, academy_name
        )

    def test_principal_without_academy(self):
        principal = PrincipalFactory.create(academy=None)

        with self.assertRaises(NotFoundError) as context:
            self.orchestrator.withdraw(
                UserRole.PRINCIPAL, principal.user.id, None
            )
        self.assertEqual(
            context.exception.message, "원장 또는 학원 정보를 찾을 수 없습니다."
        )
