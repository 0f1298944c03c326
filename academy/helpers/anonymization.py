import re
import secrets
import string
from datetime import datetime

from academy.helpers.time import to_timestamp_ms

FULLY_MASKED_PHONE_NUMBER = "****-****-****"
MASKED_ACCOUNT_SUFFIX = "******"
ANONYMOUS_ID_SUFFIX_LENGTH = 8

BASE36_ALPHABET = string.digits + string.ascii_uppercase

PHONE_NUMBER_PATTERN = re.compile(r"(\d{2,3})-?(\d{3,4})-?(\d{4})")
EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
ACCOUNT_NUMBER_PATTERN = re.compile(r"\d{3}-\d{3}-\d{6,}")


def anonymize_name(name):
    if not name:
        return name
    if len(name) == 1:
        return name
    if len(name) == 2:
        return name[0] + "*"
    return name[0] + "*" * (len(name) - 2) + name[-1]


def anonymize_phone_number(phone_number):
    if not phone_number:
        return phone_number

    digits = phone_number.replace("-", "")
    if len(digits) not in (10, 11) or not digits.isdigit():
        return FULLY_MASKED_PHONE_NUMBER

    parts = phone_number.split("-")
    if len(parts) == 3:
        return f"{parts[0]}-****-{parts[2]}"
    return digits[:3] + "****" + digits[-4:]


def anonymize_account_number(account_number):
    if not account_number:
        return account_number

    parts = account_number.split("-")
    if len(parts) == 3:
        return f"{parts[0]}-***-{MASKED_ACCOUNT_SUFFIX}"

    digits = account_number.replace("-", "")
    if len(digits) < 6:
        return MASKED_ACCOUNT_SUFFIX
    return digits[:-6] + MASKED_ACCOUNT_SUFFIX


def anonymize_email(email):
    if not email:
        return email
    local_part, separator, domain = email.partition("@")
    if not separator or not local_part or not domain:
        return email
    return f"{local_part[0]}***@{domain}"


def anonymize_text(text):
    """Mask phone numbers, emails and account numbers found in free text.

    Empty input gives None, text without any match is returned as is.
    """
    if not text:
        return None

    # account numbers first, the phone pattern would eat their prefix
    text = ACCOUNT_NUMBER_PATTERN.sub(
        lambda m: anonymize_account_number(m.group(0)), text
    )
    text = PHONE_NUMBER_PATTERN.sub(
        lambda m: anonymize_phone_number(m.group(0)), text
    )
    text = EMAIL_PATTERN.sub(lambda m: anonymize_email(m.group(0)), text)
    return text


def random_base36(length):
    return "".join(secrets.choice(BASE36_ALPHABET) for _ in range(length))


def generate_anonymous_id(role, now_ms=None):
    role_name = getattr(role, "value", role)
    if now_ms is None:
        now_ms = to_timestamp_ms(datetime.now())
    return (
        f"ANON_{str(role_name).upper()}_{now_ms}_"
        f"{random_base36(ANONYMOUS_ID_SUFFIX_LENGTH)}"
    )
