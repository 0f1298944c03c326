import logging

from academy import db
from academy.helpers.time import add_years

logger = logging.getLogger(__name__)

FINANCIAL_RETENTION_YEARS = 5
ENROLLMENT_RETENTION_YEARS = 5
ACTIVITY_RETENTION_YEARS = 5
ATTENDANCE_RETENTION_YEARS = 3


class AnonymizedModel(db.Model):
    """Append-only row of the retention tables.

    Subclasses set `retention_years` and `natural_key`, the columns that
    identify the source record a row was migrated from.
    """

    __abstract__ = True

    retention_years = FINANCIAL_RETENTION_YEARS
    natural_key = ()

    @classmethod
    def compute_retention_date(cls, withdrawal_date):
        return add_years(withdrawal_date, cls.retention_years)

    @staticmethod
    def map_status(status, status_map, default):
        if not status:
            return default
        mapped = status_map.get(status.upper())
        if mapped is None:
            logger.warning(
                f"Unknown status {status!r}, falling back to {default.value}"
            )
            return default
        return mapped

    def natural_key_values(self):
        return tuple(getattr(self, column) for column in self.natural_key)

    @classmethod
    def check_existing_record(cls, record):
        """Return the stored row sharing `record`'s natural key, if any."""
        if not cls.natural_key:
            return None
        filters = {
            column: getattr(record, column) for column in cls.natural_key
        }
        existing = cls.query.filter_by(**filters).one_or_none()
        if existing:
            logger.debug(
                f"Found existing {cls.__name__} record for {filters}"
            )
        return existing
