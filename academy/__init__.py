from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

import config
from config import ACADEMY_ENV

app = Flask(__name__)
app.config.from_object(getattr(config, f"{ACADEMY_ENV.capitalize()}Config"))

if app.config["SENTRY_URL"]:
    from academy.helpers.sentry import setup_sentry

    setup_sentry()

if app.config["ECHO_DB_QUERIES"]:
    app.config["SQLALCHEMY_ECHO"] = True

db = SQLAlchemy(app, session_options={"expire_on_commit": False})

Migrate(app, db)

from academy.helpers import logging
from academy import models

from . import commands
