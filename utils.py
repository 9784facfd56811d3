import math
from datetime import date, datetime, timedelta

DATE_FORMAT = "%Y-%m-%d"


def parse_price(value):
    """Return value as a finite, non-negative float, or 0.0 if it isn't one."""
    if isinstance(value, bool):
        return 0.0
    try:
        amount = float(str(value).strip().replace(",", "."))
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def round_half_up(value):
    return int(math.floor(value + 0.5))


def format_date(d):
    return d.strftime(DATE_FORMAT)


def parse_date(date_str, formats=(DATE_FORMAT,)):
    if isinstance(date_str, datetime):
        return date_str.date()
    if isinstance(date_str, date):
        return date_str
    raw = str(date_str).strip()
    for fmt in formats:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def first_of_next_month(year, month):
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


def last_day_of_month(year, month):
    return first_of_next_month(year, month) - timedelta(days=1)
