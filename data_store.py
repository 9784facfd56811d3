import copy
import json
import logging
import os

from models import Record

logger = logging.getLogger(__name__)

DATA_DIR = "data"

FILES = {
    "records": "drink_records_2026.json",
    "shops": "drink_shops_2026.json",
}

DEFAULT_DATA = {
    "records": [],
    "shops": ["50嵐", "一沐日", "五桐號", "迷客夏", "可不可", "得正"],
}


def file_path(name, data_dir=DATA_DIR):
    return os.path.join(data_dir, FILES[name])


def load_json(name, data_dir=DATA_DIR):
    """Load a stored entry, falling back to its default when missing or unreadable."""
    path = file_path(name, data_dir)
    if not os.path.exists(path):
        return copy.deepcopy(DEFAULT_DATA[name])
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Could not read %s, using defaults: %s", path, exc)
        return copy.deepcopy(DEFAULT_DATA[name])


def save_json(name, data, data_dir=DATA_DIR):
    path = file_path(name, data_dir)
    try:
        os.makedirs(data_dir, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        return False
    return True


def read_records(data_dir=DATA_DIR):
    data = load_json("records", data_dir)
    if not isinstance(data, list):
        logger.warning("Stored records are not a list, starting empty")
        return []

    records = []
    seen_ids = set()
    for entry in data:
        try:
            record = Record.from_dict(entry)
        except (TypeError, ValueError) as exc:
            logger.warning("Skipping malformed record: %s", exc)
            continue
        if record.id in seen_ids:
            logger.warning("Skipping record with duplicate id %s", record.id)
            continue
        seen_ids.add(record.id)
        records.append(record)
    return records


def write_records(records, data_dir=DATA_DIR):
    return save_json("records", [r.to_dict() for r in records], data_dir)


def read_shops(data_dir=DATA_DIR):
    data = load_json("shops", data_dir)
    if not isinstance(data, list):
        logger.warning("Stored shops are not a list, using the default shops")
        return copy.deepcopy(DEFAULT_DATA["shops"])

    shops = []
    for name in data:
        if not isinstance(name, str) or not name.strip():
            continue
        name = name.strip()
        if name not in shops:
            shops.append(name)
    return shops


def write_shops(shops, data_dir=DATA_DIR):
    return save_json("shops", list(shops), data_dir)
