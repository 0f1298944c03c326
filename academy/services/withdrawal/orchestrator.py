import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict

from academy import app
from academy.helpers.anonymization import generate_anonymous_id
from academy.helpers.errors import (
    AnonymousIdCollisionError,
    InvalidWithdrawalRoleError,
    NotFoundError,
    PreconditionFailedError,
)
from academy.helpers.files import delete_profile_photo
from academy.models import UserRole
from academy.services.withdrawal.masking_rules import (
    is_masked_user,
    masked_user_data,
)
from academy.services.withdrawal.repositories import UnitOfWork
from academy.services.withdrawal.strategies import STRATEGIES

logger = logging.getLogger(__name__)

WITHDRAWAL_REASON_CATEGORY = "OTHER"
ALREADY_WITHDRAWN_MESSAGE = "이미 탈퇴한 사용자입니다."


@dataclass
class WithdrawalResult:
    anonymous_id: str
    role: UserRole
    migrated_counts: Dict[str, int] = field(default_factory=dict)
    photo_deleted: bool = False


def parse_role(role):
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(str(role).upper())
    except ValueError:
        raise InvalidWithdrawalRoleError(extensions=dict(role=str(role)))


def generate_unique_anonymous_id(retention, role):
    anonymous_id = generate_anonymous_id(role)
    if retention.anonymous_id_exists(anonymous_id):
        raise AnonymousIdCollisionError(
            extensions=dict(anonymous_id=anonymous_id)
        )
    return anonymous_id


class WithdrawalOrchestrator:
    """Runs a withdrawal as collect, validate, then one atomic write phase.

    The atomic phase creates the anonymized user, migrates the role's
    history, masks the live rows and records the withdrawal. Any error in it
    rolls the whole phase back. The profile photo is only deleted once that
    phase has committed.
    """

    def __init__(
        self,
        unit_of_work_factory=UnitOfWork,
        file_deleter=None,
        strategies=None,
    ):
        self.unit_of_work_factory = unit_of_work_factory
        self.file_deleter = file_deleter or delete_profile_photo
        self.strategies = strategies or STRATEGIES

    def withdraw(self, role, user_id, reason=None) -> WithdrawalResult:
        role = parse_role(role)
        strategy = self.strategies[role]
        uow = self.unit_of_work_factory()
        logger.info(f"Starting {role.value} withdrawal of user {user_id}")

        user = uow.live.get_user(user_id)
        if not user:
            raise NotFoundError()
        if user.role != role:
            raise NotFoundError(strategy.profile_not_found_message)
        if is_masked_user(user):
            raise NotFoundError(ALREADY_WITHDRAWN_MESSAGE)
        context = strategy.collect(uow.live, user)
        photo_url = strategy.photo_url(context)

        today = date.today()
        try:
            strategy.validate(uow.live, context, today)
        except PreconditionFailedError as e:
            logger.info(f"Withdrawal of user {user_id} rejected: {e.code}")
            raise

        max_attempts = app.config["ANONYMOUS_ID_MAX_ATTEMPTS"]
        for attempt in range(1, max_attempts + 1):
            try:
                result = self._run_atomic_phase(
                    uow, strategy, context, reason, today
                )
            except AnonymousIdCollisionError:
                if attempt == max_attempts:
                    raise
                logger.warning(
                    f"Anonymous id collision while withdrawing user {user_id}, "
                    f"retrying ({attempt}/{max_attempts})"
                )
                continue
            logger.info(
                f"Withdrawal of user {user_id} committed as "
                f"{result.anonymous_id}: {result.migrated_counts}"
            )
            result.photo_deleted = self._delete_photo(photo_url)
            return result

    def _run_atomic_phase(self, uow, strategy, context, reason, today):
        with uow.begin():
            if app.config["WITHDRAWAL_REVALIDATE_IN_TRANSACTION"]:
                strategy.validate(uow.live, context, today)

            withdrawal_date = datetime.now()
            anonymous_id = generate_unique_anonymous_id(
                uow.retention, strategy.role
            )
            anonymized_user = uow.retention.create_anonymized_user(
                anonymous_id, strategy.role, withdrawal_date
            )

            migrated_counts = strategy.migrate(
                uow.retention, context, anonymized_user.id, withdrawal_date
            )

            strategy.mask(uow.live, context)
            uow.live.apply_mask(context.user, masked_user_data(context.user.id))
            logger.info(f"Masked live records of user {context.user.id}")

            uow.live.add_withdrawal_history(
                context.original_user_id,
                context.original_name,
                strategy.role,
                reason,
                reason_category=WITHDRAWAL_REASON_CATEGORY,
            )

        return WithdrawalResult(
            anonymous_id=anonymous_id,
            role=strategy.role,
            migrated_counts=migrated_counts,
        )

    def _delete_photo(self, photo_url):
        if not photo_url:
            return False
        try:
            return self.file_deleter(photo_url)
        except Exception as e:
            logger.warning(f"Profile photo deletion failed: {e!r}")
            return False


def withdraw(role, user_id, reason=None):
    return WithdrawalOrchestrator().withdraw(role, user_id, reason)
