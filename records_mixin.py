import logging
from uuid import uuid4

from data_store import write_records
from models import DEFAULT_ICE, DEFAULT_SWEETNESS, ICE_LEVELS, SWEETNESS_LEVELS, Record
from utils import parse_date, parse_price

logger = logging.getLogger(__name__)

MAX_RECORDS_PER_DAY = 2


class RecordsMixin:
    def add_record(self, shop, item, price, sweetness=DEFAULT_SWEETNESS, ice=DEFAULT_ICE, date=None):
        """
        Log a drink on date (the selected date when omitted) and persist it.

        Never rejects input: an unparsable price is stored as 0 and unknown
        sweetness/ice levels fall back to the defaults. A new shop name is
        added to the registry.
        """
        day = parse_date(date) if date is not None else self.selected_date
        if day is None:
            logger.warning("Unparsable date %r, using selected date %s", date, self.selected_date)
            day = self.selected_date

        if sweetness not in SWEETNESS_LEVELS:
            logger.warning("Unknown sweetness %r, using %s", sweetness, DEFAULT_SWEETNESS)
            sweetness = DEFAULT_SWEETNESS
        if ice not in ICE_LEVELS:
            logger.warning("Unknown ice level %r, using %s", ice, DEFAULT_ICE)
            ice = DEFAULT_ICE

        record = Record(
            id=str(uuid4()),
            shop=str(shop).strip(),
            item=str(item).strip(),
            price=parse_price(price),
            sweetness=sweetness,
            ice=ice,
            date=day,
        )

        self.add_shop(record.shop)
        self.records.append(record)
        write_records(self.records, self.data_dir)
        logger.info("Added record %s: %s %s on %s", record.id, record.shop, record.item, day)
        return record

    def remove_record(self, record_id):
        kept = [r for r in self.records if r.id != record_id]
        if len(kept) == len(self.records):
            return False

        self.records = kept
        write_records(self.records, self.data_dir)
        logger.info("Removed record %s", record_id)
        return True

    def get_record(self, record_id):
        for r in self.records:
            if r.id == record_id:
                return r
        return None

    def records_for_date(self, day):
        day = parse_date(day)
        return [r for r in self.records if r.date == day]

    def remaining_slots(self, day):
        return max(MAX_RECORDS_PER_DAY - len(self.records_for_date(day)), 0)

    def can_add_record(self, day=None):
        return self.remaining_slots(self.selected_date if day is None else day) > 0

    def snapshot(self):
        return tuple(self.records)
