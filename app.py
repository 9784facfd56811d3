import logging
from datetime import date

from data_store import DATA_DIR, read_records, read_shops
from history_mixin import HistoryMixin
from records_mixin import RecordsMixin
from shops_mixin import ShopsMixin

logger = logging.getLogger(__name__)

TRACKED_YEAR = 2026


class DrinkTracker(RecordsMixin, ShopsMixin, HistoryMixin):
    """
    The drink log for one user.

    Construct it once at startup: it loads the stored records and shop list
    from data_dir and writes them back after every change. Analytics and the
    calendar only ever see tuples from snapshot().
    """

    def __init__(self, data_dir=DATA_DIR, today=None):
        self.data_dir = data_dir

        self.records = read_records(data_dir)
        self.shops = read_shops(data_dir)

        self.view_month = (TRACKED_YEAR, 1)
        self.selected_date = today or date.today()

        logger.info(
            "Loaded %d records and %d shops from %s", len(self.records), len(self.shops), data_dir
        )
