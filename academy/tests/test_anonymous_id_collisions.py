from datetime import datetime
from unittest.mock import patch

from academy import db
from academy.helpers.errors import AnonymousIdCollisionError
from academy.models import UserRole, WithdrawalHistory
from academy.models.anonymized import AnonymizedUser
from academy.seed.factories import StudentFactory
from academy.services.withdrawal import withdraw
from academy.services.withdrawal.repositories import (
    RetentionRepository,
    UnitOfWork,
)
from academy.tests import BaseTest

TAKEN_ID = "ANON_STUDENT_1700000000000_TAKEN000"
FREE_ID = "ANON_STUDENT_1700000000000_FREE0000"


class TestAnonymousIdCollisions(BaseTest):
    def setUp(self):
        super().setUp()
        with UnitOfWork().begin() as uow:
            uow.retention.create_anonymized_user(
                TAKEN_ID, UserRole.STUDENT, datetime(2023, 1, 1)
            )
        self.student = StudentFactory.create()

    def test_existing_id_is_skipped_at_generation(self):
        with patch(
            "academy.services.withdrawal.orchestrator.generate_anonymous_id",
            side_effect=[TAKEN_ID, FREE_ID],
        ):
            result = withdraw(UserRole.STUDENT, self.student.user.id, None)

        self.assertEqual(result.anonymous_id, FREE_ID)
        self.assertEqual(AnonymizedUser.query.count(), 2)

    def test_constraint_violation_is_retried_then_surfaced(self):
        with patch(
            "academy.services.withdrawal.orchestrator.generate_anonymous_id",
            return_value=TAKEN_ID,
        ), patch.object(
            RetentionRepository, "anonymous_id_exists", return_value=False
        ) as anonymous_id_exists:
            with self.assertRaises(AnonymousIdCollisionError):
                withdraw(UserRole.STUDENT, self.student.user.id, None)

        self.assertEqual(anonymous_id_exists.call_count, 5)
        db.session.expire_all()
        self.assertEqual(AnonymizedUser.query.count(), 1)
        self.assertEqual(WithdrawalHistory.query.count(), 0)

    def test_constraint_violation_recovers_on_retry(self):
        with patch(
            "academy.services.withdrawal.orchestrator.generate_anonymous_id",
            side_effect=[TAKEN_ID, FREE_ID],
        ), patch.object(
            RetentionRepository, "anonymous_id_exists", return_value=False
        ):
            result = withdraw(UserRole.STUDENT, self.student.user.id, None)

        self.assertEqual(result.anonymous_id, FREE_ID)
        self.assertEqual(WithdrawalHistory.query.count(), 1)

    def test_generation_gives_up_after_max_attempts(self):
        with patch(
            "academy.services.withdrawal.orchestrator.generate_anonymous_id",
            return_value=TAKEN_ID,
        ):
            with self.assertRaises(AnonymousIdCollisionError):
                withdraw(UserRole.STUDENT, self.student.user.id, None)
        self.assertEqual(WithdrawalHistory.query.count(), 0)

    def test_attempts_are_bounded_across_generation_and_retries(self):
        with patch.object(
            RetentionRepository, "anonymous_id_exists", return_value=True
        ) as anonymous_id_exists:
            with self.assertRaises(AnonymousIdCollisionError):
                withdraw(UserRole.STUDENT, self.student.user.id, None)

        self.assertEqual(anonymous_id_exists.call_count, 5)
        self.assertEqual(AnonymizedUser.query.count(), 1)
