"""Fixed enumerations and runtime settings for the workshop."""
import logging
import os
from datetime import date
from typing import Dict, List, Tuple

from src.utils.env import load_env

logger = logging.getLogger(__name__)

DEPARTMENTS: List[str] = [
    "RH",
    "TI",
    "Vendas",
    "Operações",
    "Financeiro",
    "Marketing",
]

# (value, display label)
AUTOMATION_LEVELS: List[Tuple[str, str]] = [
    ("baixo", "Baixo"),
    ("medio", "Médio"),
    ("alto", "Alto"),
]

AUTOMATION_LEVEL_LABELS: Dict[str, str] = dict(AUTOMATION_LEVELS)

# 15 a 20 de janeiro de 2025
EVENT_DATE_START = date(2025, 1, 15)
EVENT_DATE_END = date(2025, 1, 20)

ALL_FILTER = "all"

EXPORT_FILENAME_PREFIX = "inscricoes"

DEFAULT_REGISTRATIONS_FILE = "data/registrations.json"


def get_registrations_file() -> str:
    """Return the JSON store path, overridable with REGISTRATIONS_FILE."""
    load_env()
    return os.getenv("REGISTRATIONS_FILE", DEFAULT_REGISTRATIONS_FILE)


def get_event_date_range() -> Tuple[date, date]:
    """
    Return the inclusive event window.

    EVENT_DATE_START / EVENT_DATE_END (YYYY-MM-DD) override the defaults.
    A malformed or inverted override falls back to the fixed range.
    """
    load_env()
    start_raw = os.getenv("EVENT_DATE_START")
    end_raw = os.getenv("EVENT_DATE_END")

    if not start_raw and not end_raw:
        return EVENT_DATE_START, EVENT_DATE_END

    try:
        start = date.fromisoformat(start_raw) if start_raw else EVENT_DATE_START
        end = date.fromisoformat(end_raw) if end_raw else EVENT_DATE_END
    except ValueError:
        logger.warning(
            "Invalid event date override (%s, %s); using defaults", start_raw, end_raw
        )
        return EVENT_DATE_START, EVENT_DATE_END

    if start > end:
        logger.warning("Event start %s is after end %s; using defaults", start, end)
        return EVENT_DATE_START, EVENT_DATE_END

    return start, end
