"""Persistence for seminar registrations in a JSON file."""
import csv
import io
import json
import logging
from typing import Any, Dict, List

from src.models.registration import RegistrationRecord
from src.services.storage_service import load_json, lock_file, save_json
from src.utils.config import get_settings
from src.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

EMPTY_STORE = {"registrations": []}

CSV_COLUMNS = [
    ("created_at", "申込日時"),
    ("company", "会社名"),
    ("name", "氏名"),
    ("position", "役職"),
    ("email", "メールアドレス"),
    ("phone", "電話番号"),
    ("challenge", "課題に感じていること"),
]


def _store_path() -> str:
    return get_settings().registrations_file


def _load_store(path: str) -> Dict[str, Any]:
    """
    Load the store and check its shape.

    Raises:
        StorageError: If the file holds JSON that isn't {"registrations": [...]}
    """
    data = load_json(path, default=EMPTY_STORE)
    if not isinstance(data, dict):
        raise StorageError(f"Unexpected store format in {path}: {type(data).__name__}")
    data.setdefault("registrations", [])
    if not isinstance(data["registrations"], list):
        raise StorageError(f"Unexpected registrations format in {path}")
    return data


def insert_registration(record: RegistrationRecord) -> None:
    """
    Append one registration to the store.

    Args:
        record: Validated registration

    Raises:
        StorageError: If the store can't be locked, read or written
    """
    path = _store_path()
    try:
        with lock_file(path):
            data = _load_store(path)
            data["registrations"].append(record.to_dict())
            save_json(path, data, backup=True)
    except (OSError, TimeoutError, ValueError) as e:
        raise StorageError(f"Failed to store registration {record.id} in {path}: {e}") from e

    logger.debug("Stored registration %s in %s", record.id, path)


def get_all_registrations() -> List[RegistrationRecord]:
    """
    Load every stored registration, newest first.

    Raises:
        StorageError: If the store exists but can't be read
    """
    path = _store_path()
    try:
        data = _load_store(path)
    except (OSError, json.JSONDecodeError) as e:
        raise StorageError(f"Failed to read registrations from {path}: {e}") from e

    records = []
    for item in data["registrations"]:
        try:
            records.append(RegistrationRecord.from_dict(item))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed registration entry in %s: %s", path, e)

    records.sort(key=lambda r: r.created_at, reverse=True)
    return records


def registrations_to_csv(records: List[RegistrationRecord]) -> str:
    """Render registrations as CSV with Japanese column headers."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow([label for _, label in CSV_COLUMNS])
    for record in records:
        row = record.to_dict()
        writer.writerow([row.get(key) or "" for key, _ in CSV_COLUMNS])
    return buffer.getvalue()
