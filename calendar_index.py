from dataclasses import dataclass, field
from datetime import date

from utils import last_day_of_month

# Weeks start on Sunday: 0 = Sunday ... 6 = Saturday.
WEEKDAY_LABELS = ["日", "一", "二", "三", "四", "五", "六"]


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    first_weekday: int
    days: int
    counts: dict = field(default_factory=dict)

    @property
    def label(self):
        return f"{self.year} / {self.month:02d}"

    @property
    def leading_blanks(self):
        return self.first_weekday

    def count_for(self, day):
        return self.counts.get(day, 0)

    def dates(self):
        return [date(self.year, self.month, d) for d in range(1, self.days + 1)]


def first_weekday(year, month):
    return (date(year, month, 1).weekday() + 1) % 7


def days_in_month(year, month):
    return last_day_of_month(year, month).day


def shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def previous_month(year, month):
    return shift_month(year, month, -1)


def next_month(year, month):
    return shift_month(year, month, 1)


def month_view(records, year, month):
    """Layout of one month plus the number of records logged on each day."""
    n_days = days_in_month(year, month)
    counts = {d: 0 for d in range(1, n_days + 1)}
    for r in records:
        if r.date.year == year and r.date.month == month:
            counts[r.date.day] += 1

    return MonthView(
        year=year,
        month=month,
        first_weekday=first_weekday(year, month),
        days=n_days,
        counts=counts,
    )
