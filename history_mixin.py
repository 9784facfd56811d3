import logging

from analytics import compute_stats, frequency_ranking, top_frequency
from calendar_index import month_view, shift_month
from models import by_item, by_shop
from utils import parse_date

logger = logging.getLogger(__name__)


class HistoryMixin:
    # ---------------- SELECTION ----------------
    def select_date(self, day):
        parsed = parse_date(day)
        if parsed is None:
            logger.warning("Ignoring unparsable date selection %r", day)
            return self.selected_date
        self.selected_date = parsed
        return parsed

    def show_month(self, year, month):
        year, month = shift_month(year, month, 0)
        self.view_month = (year, month)
        return self.view_month

    def show_previous_month(self):
        return self.show_month(*shift_month(*self.view_month, -1))

    def show_next_month(self):
        return self.show_month(*shift_month(*self.view_month, 1))

    def selected_records(self):
        return self.records_for_date(self.selected_date)

    # ---------------- ANALYTICS ----------------
    def stats(self):
        return compute_stats(self.snapshot(), self.view_month)

    def favorite_shop(self):
        return top_frequency(self.snapshot(), by_shop)

    def favorite_item(self):
        return top_frequency(self.snapshot(), by_item)

    def ranking(self, field):
        return frequency_ranking(self.snapshot(), field)

    def calendar(self):
        year, month = self.view_month
        return month_view(self.snapshot(), year, month)
