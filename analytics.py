from dataclasses import dataclass

from models import FIELD_ACCESSORS
from utils import parse_price, round_half_up


@dataclass(frozen=True)
class Stats:
    monthly_count: int
    monthly_cost: int
    annual_count: int
    annual_cost: int


@dataclass(frozen=True)
class Frequency:
    name: str
    count: int


NO_DATA = Frequency("暫無數據", 0)


def month_number(reference_month):
    if isinstance(reference_month, int):
        return reference_month
    if isinstance(reference_month, tuple):
        return reference_month[1]
    return reference_month.month


def resolve_field(field):
    if callable(field):
        return field
    try:
        return FIELD_ACCESSORS[field]
    except KeyError:
        raise ValueError(f"Unknown record field: {field!r}") from None


def total_cost(records):
    # Prices are normalised again here so a bad stored value can't poison the sum.
    return round_half_up(sum(parse_price(r.price) for r in records))


def compute_stats(records, reference_month):
    """
    Count and cost for the reference month and for the whole store.

    The monthly filter compares the month only, not the year: the log holds a
    single year of drinks, so "annual" is simply every record.
    """
    month = month_number(reference_month)
    annual = list(records)
    monthly = [r for r in annual if r.date.month == month]

    return Stats(
        monthly_count=len(monthly),
        monthly_cost=total_cost(monthly),
        annual_count=len(annual),
        annual_cost=total_cost(annual),
    )


def count_by(records, field):
    accessor = resolve_field(field)
    counts = {}
    for r in records:
        key = accessor(r)
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts


def frequency_ranking(records, field):
    """
    All distinct values of field, most frequent first.

    Equal counts keep the order in which the values were first seen.
    """
    counts = count_by(records, field)
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [Frequency(name, count) for name, count in ranked]


def top_frequency(records, field):
    ranking = frequency_ranking(records, field)
    if not ranking:
        return NO_DATA
    return ranking[0]
