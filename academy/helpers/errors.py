from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError


class AcademyError(Exception, ABC):
    @property
    @abstractmethod
    def code(self):
        pass

    http_status_code = 500

    default_should_alert_team = True
    default_message = "Error"

    def __init__(self, message=None, should_alert_team=None, **kwargs):
        if message is None:
            message = self.default_message
        self.message = message
        self.should_alert_team = (
            should_alert_team
            if should_alert_team is not None
            else self.default_should_alert_team
        )
        self.extensions = dict(code=self.code)
        self.extensions.update(kwargs.pop("extensions", {}))
        super().__init__(message)

    def to_dict(self):
        return dict(message=self.message, extensions=self.extensions)


class InvalidWithdrawalRoleError(AcademyError):
    code = "INVALID_ROLE"
    default_message = "지원하지 않는 회원 유형입니다."
    default_should_alert_team = False
    http_status_code = 422


class NotFoundError(AcademyError):
    code = "NOT_FOUND"
    default_message = "사용자를 찾을 수 없습니다."
    default_should_alert_team = False
    http_status_code = 404


class PreconditionFailedError(AcademyError):
    code = "PRECONDITION_FAILED"
    default_should_alert_team = False
    http_status_code = 400


class HasOngoingClassesError(PreconditionFailedError):
    code = "HAS_ONGOING_CLASSES"
    default_message = "진행 중인 수업이 있어 탈퇴할 수 없습니다."

    def __init__(self, ongoing_classes, message=None, **kwargs):
        super().__init__(message, **kwargs)
        self.extensions.update(
            dict(
                ongoing_class_count=len(ongoing_classes),
                classes=[
                    dict(id=c.id, name=c.class_name, end_date=c.end_date)
                    for c in ongoing_classes
                ],
            )
        )


class HasPendingRefundsError(PreconditionFailedError):
    code = "HAS_PENDING_REFUNDS"
    default_message = "처리되지 않은 환불 요청이 있어 탈퇴할 수 없습니다."

    def __init__(self, pending_refund_count, message=None, **kwargs):
        super().__init__(message, **kwargs)
        self.extensions.update(
            dict(pending_refund_count=pending_refund_count)
        )


class HasPendingEnrollmentsError(PreconditionFailedError):
    code = "HAS_PENDING_ENROLLMENTS"
    default_message = "처리되지 않은 수강 신청이 있어 탈퇴할 수 없습니다."

    def __init__(self, pending_enrollment_count, message=None, **kwargs):
        super().__init__(message, **kwargs)
        self.extensions.update(
            dict(pending_enrollment_count=pending_enrollment_count)
        )


class AnonymousIdCollisionError(AcademyError):
    code = "ANONYMOUS_ID_COLLISION"
    default_message = "Could not generate a unique anonymous id"


class AcademyCodeGenerationError(AcademyError):
    code = "ACADEMY_CODE_GENERATION_FAILED"
    default_message = "Could not generate a unique academy code"


CONSTRAINTS_TO_ERRORS_MAP = {
    "uq_anon_user_anonymous_id": lambda e: AnonymousIdCollisionError(),
    "anon_user.anonymous_id": lambda e: AnonymousIdCollisionError(),
}


def _constraint_name(db_error):
    diag = getattr(db_error.orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    if constraint_name:
        return constraint_name
    # SQLite only reports the offending columns in the message
    message = str(db_error.orig)
    for name in CONSTRAINTS_TO_ERRORS_MAP:
        if name in message:
            return name
    return None


def handle_database_error(db_error):
    """Raise the typed error mapped to the violated constraint, if any.

    Errors without a mapping are left for the caller to re-raise unchanged.
    """
    if not isinstance(db_error, IntegrityError):
        return
    error_generator = CONSTRAINTS_TO_ERRORS_MAP.get(
        _constraint_name(db_error)
    )
    if error_generator:
        raise error_generator(db_error.orig) from db_error
