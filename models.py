from dataclasses import asdict, dataclass
from datetime import date

from utils import format_date, parse_date, parse_price

SWEETNESS_LEVELS = ["固定", "半糖", "三分糖", "二分糖", "一分糖", "無糖"]
ICE_LEVELS = ["固定", "微冰", "去冰", "溫熱"]

DEFAULT_SWEETNESS = "三分糖"
DEFAULT_ICE = "微冰"


@dataclass(frozen=True)
class Record:
    """One logged drink purchase. Records are never edited, only added or removed."""

    id: str
    shop: str
    item: str
    price: float
    sweetness: str
    ice: str
    date: date

    def to_dict(self):
        data = asdict(self)
        data["date"] = format_date(self.date)
        return data

    @classmethod
    def from_dict(cls, data):
        """
        Build a Record from its stored form.

        Raises ValueError/TypeError when the entry has no id or no valid date.
        A corrupt price is not fatal and becomes 0.
        """
        if not isinstance(data, dict):
            raise TypeError(f"record entry must be an object, got {type(data).__name__}")

        record_id = str(data.get("id", "") or "").strip()
        day = parse_date(data.get("date", ""))
        if not record_id or day is None:
            raise ValueError(f"incomplete record entry: {data!r}")

        return cls(
            id=record_id,
            shop=str(data.get("shop", "") or "").strip(),
            item=str(data.get("item", "") or "").strip(),
            price=parse_price(data.get("price", 0)),
            sweetness=str(data.get("sweetness", DEFAULT_SWEETNESS)),
            ice=str(data.get("ice", DEFAULT_ICE)),
            date=day,
        )


def by_shop(record):
    return record.shop


def by_item(record):
    return record.item


def by_sweetness(record):
    return record.sweetness


def by_ice(record):
    return record.ice


FIELD_ACCESSORS = {
    "shop": by_shop,
    "item": by_item,
    "sweetness": by_sweetness,
    "ice": by_ice,
}
