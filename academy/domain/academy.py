import logging

from academy import app, db
from academy.helpers.anonymization import random_base36
from academy.helpers.errors import AcademyCodeGenerationError
from academy.models import Academy, Principal

logger = logging.getLogger(__name__)

ACADEMY_CODE_PREFIX = "ACAD-"
ACADEMY_CODE_RANDOM_LENGTH = 8


def academy_code_exists(code):
    return (
        db.session.query(Academy.id).filter(Academy.code == code).first()
        is not None
    )


def generate_unique_academy_code(max_attempts=None):
    if max_attempts is None:
        max_attempts = app.config["ACADEMY_CODE_MAX_ATTEMPTS"]

    for attempt in range(1, max_attempts + 1):
        code = ACADEMY_CODE_PREFIX + random_base36(ACADEMY_CODE_RANDOM_LENGTH)
        if not academy_code_exists(code):
            return code
        logger.warning(
            f"Academy code collision ({attempt}/{max_attempts}), retrying"
        )

    raise AcademyCodeGenerationError(
        extensions=dict(attempts=max_attempts)
    )


def create_academy(
    principal: Principal,
    name,
    phone_number=None,
    address=None,
    description=None,
):
    """Open a new academy for a principal that does not run one yet.

    The caller owns the transaction; nothing is committed here.
    """
    academy = Academy(
        name=name,
        phone_number=phone_number,
        address=address,
        description=description,
        code=generate_unique_academy_code(),
    )
    db.session.add(academy)
    db.session.flush()

    principal.academy = academy
    logger.info(f"Academy {academy.id} created for principal {principal.id}")
    return academy
