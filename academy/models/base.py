from datetime import datetime

from sqlalchemy.orm import declared_attr

from academy import db


class BaseModel(db.Model):
    __abstract__ = True

    creation_time = db.Column(db.DateTime, nullable=False, default=datetime.now)

    @declared_attr
    def id(cls):
        return db.Column(db.Integer, primary_key=True)
