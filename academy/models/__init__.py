from .user import User, UserRole
from .academy import Academy
from .student import Student, StudentAcademy
from .teacher import Teacher
from .principal import Principal
from .class_ import Class, ClassSession
from .session_enrollment import SessionEnrollment, SessionEnrollmentStatus
from .payment import Payment
from .refund_request import RefundRequest
from .attendance import Attendance
from .rejection_detail import RejectionDetail
from .withdrawal_history import WithdrawalHistory
from . import anonymized
