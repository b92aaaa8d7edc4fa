"""Registration store backed by a locked JSON file."""
import logging
import uuid
from typing import Any, Dict, List

from src.models.registration import Registration
from src.services.storage_service import load_json, lock_file, save_json
from src.utils.constants import get_registrations_file
from src.utils.date_utils import now_iso, parse_timestamp
from src.utils.exceptions import StoreError

logger = logging.getLogger(__name__)

# JSON store path (REGISTRATIONS_FILE env var)
REGISTRATIONS_FILE = get_registrations_file()

_EMPTY_STORE: Dict[str, Any] = {"registrations": []}

# Read, write and decode faults, all surfaced as StoreError
_STORE_FAULTS = (OSError, KeyError, TypeError, ValueError)


def _load_rows() -> List[Dict[str, Any]]:
    data = load_json(REGISTRATIONS_FILE, default=_EMPTY_STORE)
    if not isinstance(data, dict):
        raise ValueError(f"Store root must be an object, got {type(data).__name__}")

    rows = data.get("registrations", [])
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise ValueError("Store \"registrations\" must be a list of objects")
    return rows


def _save_rows(rows: List[Dict[str, Any]]) -> None:
    save_json(REGISTRATIONS_FILE, {"registrations": rows}, backup=True)


def _created_sort_key(registration: Registration) -> float:
    if not registration.created_at:
        return float("-inf")
    return parse_timestamp(registration.created_at).timestamp()


def list_registrations() -> List[Registration]:
    """
    Load all registrations, newest first.

    Returns:
        List[Registration] ordered by created_at descending

    Raises:
        StoreError: If the store can't be read or holds malformed rows
    """
    try:
        rows = _load_rows()
        registrations = [Registration.from_dict(row) for row in rows]
        registrations.sort(key=_created_sort_key, reverse=True)
    except _STORE_FAULTS as e:
        logger.error(f"Failed to load registrations from {REGISTRATIONS_FILE}: {e}")
        raise StoreError("Unable to load registrations") from e

    return registrations


def create_registration(registration: Registration) -> str:
    """
    Persist a new registration.

    The store assigns id and created_at; values on the argument are ignored.

    Returns:
        str: New registration ID

    Raises:
        StoreError: If the write fails
    """
    record = registration.to_dict()
    record["id"] = uuid.uuid4().hex
    record["created_at"] = now_iso()

    try:
        with lock_file(REGISTRATIONS_FILE):
            rows = _load_rows()
            rows.append(record)
            _save_rows(rows)
    except _STORE_FAULTS as e:
        logger.error(f"Failed to create registration: {e}")
        raise StoreError("Unable to create registration") from e

    return record["id"]


def update_registration(registration_id: str, registration: Registration) -> bool:
    """
    Replace every editable field of an existing registration.

    id and created_at are kept from the stored row.

    Returns:
        bool: True if updated, False if the ID doesn't exist

    Raises:
        StoreError: If the read or write fails
    """
    try:
        with lock_file(REGISTRATIONS_FILE):
            rows = _load_rows()
            for index, row in enumerate(rows):
                if row.get("id") == registration_id:
                    updated = registration.to_dict()
                    updated["id"] = row["id"]
                    updated["created_at"] = row.get("created_at")
                    rows[index] = updated
                    _save_rows(rows)
                    return True
            return False
    except _STORE_FAULTS as e:
        logger.error(f"Failed to update registration {registration_id}: {e}")
        raise StoreError("Unable to update registration") from e


def delete_registration(registration_id: str) -> bool:
    """
    Delete a registration.

    Returns:
        bool: True if deleted, False if the ID doesn't exist

    Raises:
        StoreError: If the read or write fails
    """
    try:
        with lock_file(REGISTRATIONS_FILE):
            rows = _load_rows()
            remaining = [row for row in rows if row.get("id") != registration_id]
            if len(remaining) == len(rows):
                return False
            _save_rows(remaining)
            return True
    except _STORE_FAULTS as e:
        logger.error(f"Failed to delete registration {registration_id}: {e}")
        raise StoreError("Unable to delete registration") from e
