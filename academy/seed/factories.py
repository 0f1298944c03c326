from datetime import date, datetime
from decimal import Decimal

import factory
from werkzeug.security import generate_password_hash

from academy import db
from academy.models import (
    Academy,
    Attendance,
    Class,
    ClassSession,
    Payment,
    Principal,
    RefundRequest,
    RejectionDetail,
    SessionEnrollment,
    Student,
    StudentAcademy,
    Teacher,
    User,
    UserRole,
)

# cheap hash, tests do not need the production work factor
TEST_PASSWORD_HASH = generate_password_hash(
    "mybirthday", method="pbkdf2:sha256:1000"
)


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    class Meta:
        sqlalchemy_session = db.session
        strategy = "build"

    @classmethod
    def create(cls, **kwargs):
        obj = super().create(**kwargs)
        db.session.commit()
        return obj


class UserFactory(BaseFactory):
    class Meta:
        model = User

    user_id = factory.Sequence(lambda n: f"user{n}")
    password = TEST_PASSWORD_HASH
    name = "김민수"
    role = UserRole.STUDENT


class AcademyFactory(BaseFactory):
    class Meta:
        model = Academy

    name = factory.Sequence(lambda n: f"발레 학원 {n}")
    phone_number = "02-123-4567"
    address = "서울시 강남구 테헤란로 1"
    description = "클래식 발레 전문 학원"
    code = factory.Sequence(lambda n: f"ACAD-TEST{n:04d}")


class _ProfileFactory(BaseFactory):
    user_id = factory.LazyAttribute(lambda o: o.user.user_id)
    password = factory.LazyAttribute(lambda o: o.user.password)
    name = factory.LazyAttribute(lambda o: o.user.name)
    phone_number = "010-1234-5678"


class StudentFactory(_ProfileFactory):
    class Meta:
        model = Student

    user = factory.SubFactory(UserFactory, role=UserRole.STUDENT)
    emergency_contact = "010-9876-5432"
    birth_date = date(2005, 3, 14)
    notes = "발목 부상 이력 있음"
    refund_account_holder = "김민수"
    refund_account_number = "123-456-789012"
    refund_bank_name = "신한은행"


class StudentAcademyFactory(BaseFactory):
    class Meta:
        model = StudentAcademy

    student = factory.SubFactory(StudentFactory)
    academy = factory.SubFactory(AcademyFactory)


class TeacherFactory(_ProfileFactory):
    class Meta:
        model = Teacher

    user = factory.SubFactory(
        UserFactory, role=UserRole.TEACHER, name="이지은"
    )
    introduction = "10년 경력의 발레 강사입니다."
    photo_url = None
    education = ["한국예술종합학교 무용원"]
    specialties = ["클래식 발레"]
    certifications = ["생활체육지도자 2급"]
    years_of_experience = 10
    available_times = {"MON": ["18:00-20:00"]}
    academy = None


class PrincipalFactory(_ProfileFactory):
    class Meta:
        model = Principal

    user = factory.SubFactory(
        UserFactory, role=UserRole.PRINCIPAL, name="박서준"
    )
    email = factory.Sequence(lambda n: f"principal{n}@academy.test")
    introduction = "학원 원장입니다."
    photo_url = None
    education = []
    certifications = []
    years_of_experience = 20
    account_holder = "박서준"
    account_number = "110-234-567890"
    bank_name = "국민은행"
    academy = factory.SubFactory(AcademyFactory)


class ClassFactory(BaseFactory):
    class Meta:
        model = Class

    class_name = factory.Sequence(lambda n: f"초급 발레 {n}")
    class_code = factory.Sequence(lambda n: f"CLASS-{n}")
    tuition_fee = Decimal("150000")
    start_date = date(2020, 1, 1)
    end_date = date(2020, 3, 31)
    academy = factory.SubFactory(AcademyFactory)
    teacher = None


class ClassSessionFactory(BaseFactory):
    class Meta:
        model = ClassSession

    class_ = factory.SubFactory(ClassFactory)
    date = date(2020, 1, 6)


class SessionEnrollmentFactory(BaseFactory):
    class Meta:
        model = SessionEnrollment

    student = factory.SubFactory(StudentFactory)
    session = factory.SubFactory(ClassSessionFactory)
    status = "CONFIRMED"
    enrolled_at = datetime(2020, 1, 2, 10, 0)


class PaymentFactory(BaseFactory):
    class Meta:
        model = Payment

    session_enrollment = factory.SubFactory(SessionEnrollmentFactory)
    student_id = factory.LazyAttribute(
        lambda o: o.session_enrollment.student.id
    )
    amount = Decimal("50000")
    status = "COMPLETED"
    method = "BANK_TRANSFER"
    paid_at = datetime(2020, 1, 2, 11, 0)
    receipt_number = factory.Sequence(lambda n: f"RCPT-{n:06d}")
    note = None


class RefundRequestFactory(BaseFactory):
    class Meta:
        model = RefundRequest

    session_enrollment = factory.SubFactory(SessionEnrollmentFactory)
    student_id = factory.LazyAttribute(
        lambda o: o.session_enrollment.student.id
    )
    reason = "PERSONAL_SCHEDULE"
    detailed_reason = "개인 사정으로 환불 요청합니다."
    refund_amount = Decimal("50000")
    status = "PENDING"
    bank_name = "신한은행"
    account_number = "123-456-789012"
    account_holder = "김민수"
    requested_at = datetime(2020, 1, 3, 9, 0)


class AttendanceFactory(BaseFactory):
    class Meta:
        model = Attendance

    session_enrollment_id = None
    class_ = factory.SubFactory(ClassFactory)
    date = date(2020, 1, 6)
    status = "PRESENT"
    note = None


class RejectionDetailFactory(BaseFactory):
    class Meta:
        model = RejectionDetail

    rejection_type = "SESSION_ENROLLMENT_REJECTION"
    entity_type = "SESSION_ENROLLMENT"
    entity_id = 1
    reason = "정원 초과"
    detailed_reason = None
    rejected_at = datetime(2020, 1, 4, 12, 0)
