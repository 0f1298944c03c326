import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.orm import selectinload

from academy import db
from academy.helpers.db import atomic_transaction
from academy.models import (
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
    WithdrawalHistory,
)
from academy.models.anonymized import AnonymizedUser
from academy.models.session_enrollment import SessionEnrollmentStatus

logger = logging.getLogger(__name__)

PENDING_STATUS = "PENDING"

_enrollment_with_class = (
    selectinload(SessionEnrollment.session).selectinload(ClassSession.class_)
)
_class_with_history = (
    selectinload(Class.sessions)
    .selectinload(ClassSession.enrollments)
    .selectinload(SessionEnrollment.payment)
)


class LiveRepository:
    """Reads and masking writes on the operational tables."""

    def __init__(self, db_session):
        self.db = db_session

    def get_user(self, user_id):
        return self.db.get(User, user_id)

    def get_student(self, user_id):
        return Student.query.filter(Student.user_ref_id == user_id).one_or_none()

    def get_teacher(self, user_id):
        return Teacher.query.filter(Teacher.user_ref_id == user_id).one_or_none()

    def get_principal(self, user_id):
        return (
            Principal.query.options(selectinload(Principal.academy))
            .filter(Principal.user_ref_id == user_id)
            .one_or_none()
        )

    def get_student_payments(self, student_id) -> List[Payment]:
        return (
            Payment.query.options(
                selectinload(Payment.session_enrollment)
                .selectinload(SessionEnrollment.session)
                .selectinload(ClassSession.class_)
            )
            .filter(Payment.student_id == student_id)
            .order_by(Payment.id)
            .all()
        )

    def get_student_refunds(self, student_id) -> List[RefundRequest]:
        return (
            RefundRequest.query.options(
                selectinload(RefundRequest.session_enrollment)
                .selectinload(SessionEnrollment.session)
                .selectinload(ClassSession.class_),
                selectinload(RefundRequest.processor),
            )
            .filter(RefundRequest.student_id == student_id)
            .order_by(RefundRequest.id)
            .all()
        )

    def get_student_session_enrollments(
        self, student_id
    ) -> List[SessionEnrollment]:
        return (
            SessionEnrollment.query.options(_enrollment_with_class)
            .filter(SessionEnrollment.student_id == student_id)
            .order_by(SessionEnrollment.id)
            .all()
        )

    def get_student_attendances(self, student_id) -> List[Attendance]:
        return (
            Attendance.query.options(selectinload(Attendance.class_))
            .filter(Attendance.student_id == student_id)
            .order_by(Attendance.id)
            .all()
        )

    def get_teacher_classes(self, teacher_id) -> List[Class]:
        return (
            Class.query.options(_class_with_history)
            .filter(Class.teacher_id == teacher_id)
            .order_by(Class.id)
            .all()
        )

    def get_academy_classes(self, academy_id) -> List[Class]:
        return (
            Class.query.options(_class_with_history)
            .filter(Class.academy_id == academy_id)
            .order_by(Class.id)
            .all()
        )

    def get_ongoing_teacher_classes(self, teacher_id, today) -> List[Class]:
        return (
            Class.query.filter(
                Class.teacher_id == teacher_id, Class.end_date >= today
            )
            .order_by(Class.end_date)
            .all()
        )

    def get_ongoing_academy_classes(self, academy_id, today) -> List[Class]:
        return (
            Class.query.filter(
                Class.academy_id == academy_id, Class.end_date >= today
            )
            .order_by(Class.end_date)
            .all()
        )

    def count_pending_academy_refunds(self, academy_id) -> int:
        return (
            RefundRequest.query.join(RefundRequest.session_enrollment)
            .join(SessionEnrollment.session)
            .join(ClassSession.class_)
            .filter(
                Class.academy_id == academy_id,
                RefundRequest.status == PENDING_STATUS,
            )
            .count()
        )

    def count_pending_academy_enrollments(self, academy_id) -> int:
        return (
            SessionEnrollment.query.join(SessionEnrollment.session)
            .join(ClassSession.class_)
            .filter(
                Class.academy_id == academy_id,
                SessionEnrollment.status
                == SessionEnrollmentStatus.PENDING.value,
            )
            .count()
        )

    def get_refunds_processed_by(self, user_id) -> List[RefundRequest]:
        return (
            RefundRequest.query.filter(RefundRequest.processed_by == user_id)
            .order_by(RefundRequest.id)
            .all()
        )

    def get_rejections_by(self, user_id) -> List[RejectionDetail]:
        return (
            RejectionDetail.query.filter(RejectionDetail.rejected_by == user_id)
            .order_by(RejectionDetail.id)
            .all()
        )

    def get_academy_teachers(self, academy_id) -> List[Teacher]:
        return (
            Teacher.query.filter(Teacher.academy_id == academy_id)
            .order_by(Teacher.id)
            .all()
        )

    def count_academy_students(self, academy_id) -> int:
        return StudentAcademy.query.filter(
            StudentAcademy.academy_id == academy_id
        ).count()

    def apply_mask(self, record, masked_data):
        for column, value in masked_data.items():
            setattr(record, column, value)
        self.db.flush()

    def detach_students_from_academy(self, academy_id) -> int:
        count = StudentAcademy.query.filter(
            StudentAcademy.academy_id == academy_id
        ).delete(synchronize_session=False)
        logger.info(f"Detached {count} students from academy {academy_id}")
        return count

    def detach_teachers_from_academy(self, academy_id) -> int:
        count = Teacher.query.filter(Teacher.academy_id == academy_id).update(
            {Teacher.academy_id: None}, synchronize_session=False
        )
        logger.info(f"Detached {count} teachers from academy {academy_id}")
        return count

    def add_withdrawal_history(
        self, user_id, user_name, user_role, reason, reason_category="OTHER"
    ):
        history = WithdrawalHistory(
            user_id=user_id,
            user_name=user_name,
            user_role=user_role,
            reason=reason,
            reason_category=reason_category,
        )
        self.db.add(history)
        self.db.flush()
        return history


class RetentionRepository:
    """Append-only writes on the anon_ tables."""

    def __init__(self, db_session):
        self.db = db_session

    def anonymous_id_exists(self, anonymous_id) -> bool:
        return (
            AnonymizedUser.query.filter(
                AnonymizedUser.anonymous_id == anonymous_id
            ).first()
            is not None
        )

    def create_anonymized_user(self, anonymous_id, role, withdrawal_date):
        anonymized_user = AnonymizedUser.anonymize(
            anonymous_id, role, withdrawal_date
        )
        self.db.add(anonymized_user)
        # surfaces the anonymous id unique constraint right away
        self.db.flush()
        return anonymized_user

    def bulk_insert(self, model, records) -> int:
        """Add `records`, skipping those whose natural key is already stored.

        Returns the number of rows actually inserted.
        """
        seen = set()
        to_insert = []
        for record in records:
            key = record.natural_key_values()
            if key in seen or model.check_existing_record(record):
                logger.info(
                    f"Skipping already migrated {model.__name__} {key}"
                )
                continue
            seen.add(key)
            to_insert.append(record)

        if to_insert:
            self.db.add_all(to_insert)
            self.db.flush()
        return len(to_insert)


class UnitOfWork:
    """Both repositories bound to one session and one transaction."""

    def __init__(self, db_session=None):
        self.db = db_session or db.session
        self.live = LiveRepository(self.db)
        self.retention = RetentionRepository(self.db)

    @contextmanager
    def begin(self):
        with atomic_transaction(commit_at_end=True):
            yield self
