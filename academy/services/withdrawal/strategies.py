import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from academy.helpers.errors import (
    HasOngoingClassesError,
    HasPendingEnrollmentsError,
    HasPendingRefundsError,
    NotFoundError,
)
from academy.models import UserRole
from academy.services.withdrawal.masking_rules import (
    masked_academy_data,
    masked_principal_data,
    masked_student_data,
    masked_teacher_data,
)
from academy.services.withdrawal.migrators import EntityMigrator

logger = logging.getLogger(__name__)


@dataclass
class WithdrawalContext:
    """Rows gathered for one withdrawal before the atomic phase opens.

    The original identity is copied out because masking rewrites `user`.
    """

    user: object
    profile: object
    original_user_id: str
    original_name: str
    payments: List = field(default_factory=list)
    refunds: List = field(default_factory=list)
    session_enrollments: List = field(default_factory=list)
    attendances: List = field(default_factory=list)
    classes: List = field(default_factory=list)
    academy: Optional[object] = None
    teachers: List = field(default_factory=list)
    student_count: int = 0
    processed_refunds: List = field(default_factory=list)
    rejections: List = field(default_factory=list)


class WithdrawalStrategy(ABC):
    role = None
    profile_not_found_message = NotFoundError.default_message

    def _new_context(self, user, profile, **kwargs):
        return WithdrawalContext(
            user=user,
            profile=profile,
            original_user_id=user.user_id,
            original_name=user.name,
            **kwargs,
        )

    @abstractmethod
    def collect(self, live, user) -> WithdrawalContext:
        pass

    def validate(self, live, context, today):
        """Raise a PreconditionFailedError when the user may not leave yet."""
        pass

    @abstractmethod
    def migrate(self, retention, context, anonymous_user_id, withdrawal_date):
        """Return the number of rows migrated per entity type."""
        pass

    @abstractmethod
    def mask(self, live, context):
        pass

    def photo_url(self, context):
        return None


class StudentWithdrawal(WithdrawalStrategy):
    role = UserRole.STUDENT
    profile_not_found_message = "학생 정보를 찾을 수 없습니다."

    def collect(self, live, user):
        student = live.get_student(user.id)
        if not student:
            raise NotFoundError(self.profile_not_found_message)

        return self._new_context(
            user,
            student,
            payments=live.get_student_payments(student.id),
            refunds=live.get_student_refunds(student.id),
            session_enrollments=live.get_student_session_enrollments(
                student.id
            ),
            attendances=live.get_student_attendances(student.id),
        )

    def migrate(self, retention, context, anonymous_user_id, withdrawal_date):
        migrator = EntityMigrator(retention)
        return dict(
            session_enrollments=migrator.migrate_session_enrollments(
                context.session_enrollments, anonymous_user_id, withdrawal_date
            ),
            payments=migrator.migrate_payments(
                context.payments, anonymous_user_id, withdrawal_date
            ),
            refunds=migrator.migrate_refunds(
                context.refunds, anonymous_user_id, withdrawal_date
            ),
            attendances=migrator.migrate_attendances(
                context.attendances, anonymous_user_id, withdrawal_date
            ),
        )

    def mask(self, live, context):
        live.apply_mask(context.profile, masked_student_data(context.user.id))


class TeacherWithdrawal(WithdrawalStrategy):
    role = UserRole.TEACHER
    profile_not_found_message = "강사 정보를 찾을 수 없습니다."

    def collect(self, live, user):
        teacher = live.get_teacher(user.id)
        if not teacher:
            raise NotFoundError(self.profile_not_found_message)

        return self._new_context(
            user, teacher, classes=live.get_teacher_classes(teacher.id)
        )

    def validate(self, live, context, today):
        ongoing_classes = live.get_ongoing_teacher_classes(
            context.profile.id, today
        )
        if ongoing_classes:
            raise HasOngoingClassesError(ongoing_classes)

    def migrate(self, retention, context, anonymous_user_id, withdrawal_date):
        migrator = EntityMigrator(retention)
        return dict(
            teacher_activities=migrator.migrate_teacher_activities(
                context.classes, anonymous_user_id, withdrawal_date
            )
        )

    def mask(self, live, context):
        live.apply_mask(context.profile, masked_teacher_data(context.user.id))

    def photo_url(self, context):
        return context.profile.photo_url


class PrincipalWithdrawal(WithdrawalStrategy):
    role = UserRole.PRINCIPAL
    profile_not_found_message = "원장 또는 학원 정보를 찾을 수 없습니다."

    def collect(self, live, user):
        principal = live.get_principal(user.id)
        if not principal or not principal.academy:
            raise NotFoundError(self.profile_not_found_message)

        academy = principal.academy
        return self._new_context(
            user,
            principal,
            academy=academy,
            classes=live.get_academy_classes(academy.id),
            teachers=live.get_academy_teachers(academy.id),
            student_count=live.count_academy_students(academy.id),
            processed_refunds=live.get_refunds_processed_by(user.id),
            rejections=live.get_rejections_by(user.id),
        )

    def validate(self, live, context, today):
        academy_id = context.academy.id

        ongoing_classes = live.get_ongoing_academy_classes(academy_id, today)
        if ongoing_classes:
            raise HasOngoingClassesError(ongoing_classes)

        pending_refund_count = live.count_pending_academy_refunds(academy_id)
        if pending_refund_count:
            raise HasPendingRefundsError(pending_refund_count)

        pending_enrollment_count = live.count_pending_academy_enrollments(
            academy_id
        )
        if pending_enrollment_count:
            raise HasPendingEnrollmentsError(pending_enrollment_count)

    def migrate(self, retention, context, anonymous_user_id, withdrawal_date):
        migrator = EntityMigrator(retention)
        return dict(
            principal_activities=migrator.migrate_principal_activities(
                context.profile,
                context.academy,
                context.classes,
                context.teachers,
                context.student_count,
                context.processed_refunds,
                context.rejections,
                anonymous_user_id,
                withdrawal_date,
            )
        )

    def mask(self, live, context):
        academy_id = context.academy.id
        live.detach_students_from_academy(academy_id)
        live.detach_teachers_from_academy(academy_id)
        live.apply_mask(context.academy, masked_academy_data())
        live.apply_mask(
            context.profile, masked_principal_data(context.user.id)
        )

    def photo_url(self, context):
        return context.profile.photo_url


STRATEGIES = {
    strategy.role: strategy
    for strategy in (
        StudentWithdrawal(),
        TeacherWithdrawal(),
        PrincipalWithdrawal(),
    )
}
