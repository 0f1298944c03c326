"""Replacement values written over the live rows of a withdrawn user.

Each factory returns the complete set of columns to overwrite, never a
partial patch.
"""
import secrets

from werkzeug.security import generate_password_hash

WITHDRAWN_NAME = "탈퇴한 사용자"
WITHDRAWN_USER_PREFIX = "WITHDRAWN_USER_"

CLOSED_ACADEMY_NAME = "폐쇄된 학원"
CLOSED_ACADEMY_PHONE_NUMBER = "000-0000-0000"
CLOSED_ACADEMY_ADDRESS = "주소 정보 없음"
CLOSED_ACADEMY_DESCRIPTION = "운영이 종료된 학원입니다."


def random_password_hash():
    # hash of a throwaway secret that is never stored or returned
    return generate_password_hash(secrets.token_urlsafe(32))


def is_masked_user(user):
    return bool(user.user_id) and user.user_id.startswith(
        WITHDRAWN_USER_PREFIX
    )


def masked_user_data(user_id):
    return dict(
        user_id=f"{WITHDRAWN_USER_PREFIX}{user_id}",
        password=random_password_hash(),
        name=WITHDRAWN_NAME,
    )


def masked_student_data(user_id):
    return dict(
        user_id=f"WITHDRAWN_STUDENT_{user_id}",
        password=random_password_hash(),
        name=WITHDRAWN_NAME,
        phone_number=None,
        emergency_contact=None,
        birth_date=None,
        notes=None,
        refund_account_holder=None,
        refund_account_number=None,
        refund_bank_name=None,
    )


def masked_teacher_data(user_id):
    return dict(
        user_id=f"WITHDRAWN_TEACHER_{user_id}",
        password=random_password_hash(),
        name=WITHDRAWN_NAME,
        phone_number=None,
        introduction=None,
        photo_url=None,
        education=[],
        specialties=[],
        certifications=[],
        years_of_experience=None,
        available_times=None,
        academy_id=None,
    )


def masked_principal_data(user_id):
    return dict(
        user_id=f"WITHDRAWN_PRINCIPAL_{user_id}",
        password=random_password_hash(),
        name=WITHDRAWN_NAME,
        phone_number=None,
        email=None,
        introduction=None,
        photo_url=None,
        education=[],
        certifications=[],
        years_of_experience=None,
        account_holder=None,
        account_number=None,
        bank_name=None,
    )


def masked_academy_data():
    return dict(
        name=CLOSED_ACADEMY_NAME,
        phone_number=CLOSED_ACADEMY_PHONE_NUMBER,
        address=CLOSED_ACADEMY_ADDRESS,
        description=CLOSED_ACADEMY_DESCRIPTION,
    )
