import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from academy import app
from academy.helpers.errors import NotFoundError, PreconditionFailedError
from config import ACADEMY_ENV


FILTER_OUT_ERRORS = [
    NotFoundError,
    PreconditionFailedError,
]


def filter_errors(event, hint):
    if "exc_info" in hint:
        exc_type, exc_value, tb = hint["exc_info"]
        if any(
            [
                issubclass(exc_type, filtered_out_error_type)
                for filtered_out_error_type in FILTER_OUT_ERRORS
            ]
        ):
            return None
    return event


def setup_sentry():
    sentry_sdk.init(
        dsn=app.config["SENTRY_URL"],
        integrations=[FlaskIntegration()],
        environment=ACADEMY_ENV,
        before_send=filter_errors,
    )
