from dateutil.relativedelta import relativedelta


def to_timestamp_ms(date_time):
    return int(date_time.timestamp() * 1000)


def add_years(date_time, years):
    # Feb 29 falls back to Feb 28 on non-leap target years
    return date_time + relativedelta(years=years)
