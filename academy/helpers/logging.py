import logging
from logging import StreamHandler

import requests
from flask.logging import default_handler

from academy import app
from academy.helpers.errors import AcademyError
from config import ACADEMY_ENV

root_logger = logging.getLogger()


def post_to_mattermost(message, emoji, color, title=None):
    requests.post(
        app.config["MATTERMOST_WEBHOOK"],
        json=dict(
            channel=app.config["MATTERMOST_ALERT_CHANNEL"],
            username=f"Academy backend - {ACADEMY_ENV.capitalize()}",
            icon_emoji=emoji,
            attachments=[
                dict(
                    fallback=title or message,
                    color=color,
                    title=title,
                    text=message,
                )
            ],
        ),
        timeout=10,
    )


class MattermostHandler(logging.Handler):
    def emit(self, record):
        if record.levelno >= logging.ERROR:
            emoji = ":rotating_light:"
            color = "#a6343c"
        else:
            emoji = ":warning:"
            color = "#ffba20"

        title = getattr(record, "log_title", None)
        if not title and record.exc_info and type(record.exc_info) is tuple:
            exception = record.exc_info[1]
            if isinstance(exception, AcademyError):
                title = exception.__class__.__name__

        try:
            post_to_mattermost(self.format(record), emoji, color, title=title)
        except requests.RequestException:
            self.handleError(record)


class MattermostFormatter(logging.Formatter):
    def formatException(self, ei):
        return f"{ei[1]}"


def _should_alert_team(record):
    if record.levelno < logging.WARNING:
        return False
    if record.exc_info and type(record.exc_info) is tuple:
        exception = record.exc_info[1]
        if isinstance(exception, AcademyError):
            return exception.should_alert_team
    return True


app.logger.setLevel(logging.INFO)
root_logger.setLevel(logging.INFO)
app.logger.removeHandler(default_handler)

logging.getLogger("werkzeug").setLevel(logging.ERROR)

stream_handler = StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("[%(asctime)s] %(levelname)s in %(name)s: %(message)s")
)
root_logger.addHandler(stream_handler)


if app.config["MATTERMOST_WEBHOOK"]:
    mattermost_handler = MattermostHandler()
    mattermost_handler.addFilter(_should_alert_team)
    mattermost_handler.setFormatter(MattermostFormatter("%(message)s"))
    root_logger.addHandler(mattermost_handler)
