import logging
from typing import List

from academy.models.anonymized import (
    AnonymizedAttendance,
    AnonymizedPayment,
    AnonymizedPrincipalActivity,
    AnonymizedRefund,
    AnonymizedSessionEnrollment,
    AnonymizedTeacherActivity,
)

logger = logging.getLogger(__name__)


class EntityMigrator:
    """Copies anonymized versions of live records into the anon_ tables.

    Every migrate_* method is a no-op returning 0 on empty input and returns
    the number of rows inserted otherwise. Records already migrated under the
    same natural key are skipped.
    """

    def __init__(self, retention_repository):
        self.retention = retention_repository

    def log_migration(self, count: int, entity_type: str):
        if count == 0:
            logger.info(f"No {entity_type} to migrate")
            return
        if count > 1:
            entity_type = (
                entity_type[:-1] + "ies"
                if entity_type.endswith("y")
                else entity_type + "s"
            )
        logger.info(f"Migrated {count} {entity_type}")

    def _migrate(
        self, model, sources, entity_type, anonymous_user_id, withdrawal_date
    ):
        if not sources:
            self.log_migration(0, entity_type)
            return 0

        records = [
            model.anonymize(source, anonymous_user_id, withdrawal_date)
            for source in sources
        ]
        count = self.retention.bulk_insert(model, records)
        self.log_migration(count, entity_type)
        return count

    def migrate_payments(self, payments, anonymous_user_id, withdrawal_date):
        return self._migrate(
            AnonymizedPayment,
            payments,
            "payment",
            anonymous_user_id,
            withdrawal_date,
        )

    def migrate_refunds(self, refunds, anonymous_user_id, withdrawal_date):
        return self._migrate(
            AnonymizedRefund,
            refunds,
            "refund",
            anonymous_user_id,
            withdrawal_date,
        )

    def migrate_session_enrollments(
        self, session_enrollments, anonymous_user_id, withdrawal_date
    ):
        return self._migrate(
            AnonymizedSessionEnrollment,
            session_enrollments,
            "session enrollment",
            anonymous_user_id,
            withdrawal_date,
        )

    def migrate_attendances(
        self, attendances, anonymous_user_id, withdrawal_date
    ):
        return self._migrate(
            AnonymizedAttendance,
            attendances,
            "attendance",
            anonymous_user_id,
            withdrawal_date,
        )

    def migrate_teacher_activities(
        self, classes, anonymous_user_id, withdrawal_date
    ):
        return self._migrate(
            AnonymizedTeacherActivity,
            classes,
            "teacher activity",
            anonymous_user_id,
            withdrawal_date,
        )

    def migrate_principal_activities(
        self,
        principal,
        academy,
        classes,
        teachers,
        student_count: int,
        refunds: List,
        rejections: List,
        anonymous_user_id,
        withdrawal_date,
    ):
        records = [
            AnonymizedPrincipalActivity.anonymize_academy(
                academy,
                classes,
                len(teachers),
                student_count,
                principal,
                anonymous_user_id,
                withdrawal_date,
            )
        ]
        records.extend(
            AnonymizedPrincipalActivity.anonymize_refund_process(
                refund, anonymous_user_id, withdrawal_date
            )
            for refund in refunds
        )
        records.extend(
            AnonymizedPrincipalActivity.anonymize_rejection(
                rejection, anonymous_user_id, withdrawal_date
            )
            for rejection in rejections
        )
        records.extend(
            AnonymizedPrincipalActivity.anonymize_teacher_management(
                teacher, anonymous_user_id, withdrawal_date
            )
            for teacher in teachers
        )

        count = self.retention.bulk_insert(AnonymizedPrincipalActivity, records)
        self.log_migration(count, "principal activity")
        return count
