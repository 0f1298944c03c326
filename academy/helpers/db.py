import logging
from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.exc import DatabaseError

from academy import db
from academy.helpers.errors import handle_database_error

logger = logging.getLogger(__name__)


def _raise_commit_error(*args, **kwargs):
    raise RuntimeError(
        "Detected a commit attempt inside what is marked as an atomic transaction, aborting."
    )


@contextmanager
def atomic_transaction(commit_at_end=False):
    """Run the block as a single unit against the current session.

    Nothing inside the block may commit. On exit the session is committed
    (commit_at_end=True) or rolled back; any exception rolls everything back
    and propagates unchanged, except constraint violations that map to a
    typed error.
    """
    event.listen(db.session(), "before_commit", _raise_commit_error)
    try:
        yield
        if commit_at_end:
            event.remove(db.session(), "before_commit", _raise_commit_error)
            db.session.commit()
        else:
            db.session.rollback()
            event.remove(db.session(), "before_commit", _raise_commit_error)
    except Exception as e:
        if event.contains(db.session(), "before_commit", _raise_commit_error):
            event.remove(db.session(), "before_commit", _raise_commit_error)
        db.session.rollback()
        logger.error(f"Transaction rolled back: {e!r}")
        if isinstance(e, DatabaseError):
            handle_database_error(e)
        raise e


def enum_column(enum, **kwargs):
    return db.Column(
        db.Enum(
            enum,
            native_enum=False,
            validate_strings=True,
            values_callable=lambda e: [item.value for item in e],
        ),
        **kwargs,
    )
