from .base import AnonymizedModel
from .user import AnonymizedUser
from .payment import AnonymizedPayment, AnonymizedPaymentStatus
from .refund import AnonymizedRefund, AnonymizedRefundStatus
from .session_enrollment import (
    AnonymizedSessionEnrollment,
    AnonymizedEnrollmentStatus,
)
from .attendance import AnonymizedAttendance, AnonymizedAttendanceStatus
from .teacher_activity import AnonymizedTeacherActivity
from .principal_activity import (
    AnonymizedPrincipalActivity,
    PrincipalActivityType,
)

__all__ = [
    "AnonymizedModel",
    "AnonymizedUser",
    "AnonymizedPayment",
    "AnonymizedPaymentStatus",
    "AnonymizedRefund",
    "AnonymizedRefundStatus",
    "AnonymizedSessionEnrollment",
    "AnonymizedEnrollmentStatus",
    "AnonymizedAttendance",
    "AnonymizedAttendanceStatus",
    "AnonymizedTeacherActivity",
    "AnonymizedPrincipalActivity",
    "PrincipalActivityType",
]
