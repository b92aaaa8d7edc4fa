"""Registration data validation utilities."""
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from src.models.registration import Registration
from src.utils.constants import AUTOMATION_LEVEL_LABELS, DEPARTMENTS, get_event_date_range
from src.utils.date_utils import format_day, is_within_range, parse_day

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 255
ACCESSIBILITY_DETAIL_MAX_LENGTH = 500
NOTES_MAX_LENGTH = 1000
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 100

ACCESSIBILITY_DETAIL_REQUIRED = "Descreva sua necessidade de acessibilidade"

EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FieldError:
    """A validation message attached to one form field."""

    field: str
    message: str


def _clean(value: Any) -> str:
    """Trim strings; anything else becomes an empty string."""
    if isinstance(value, str):
        return value.strip()
    return ""


def validate_full_name(name: Any) -> Tuple[bool, str]:
    """
    Validate attendee full name.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if 3-100 characters after trimming
        - (False, "Nome deve ter pelo menos 3 caracteres") if too short
        - (False, "Nome deve ter no máximo 100 caracteres") if too long
    """
    cleaned = _clean(name)
    if len(cleaned) < NAME_MIN_LENGTH:
        return False, "Nome deve ter pelo menos 3 caracteres"
    if len(cleaned) > NAME_MAX_LENGTH:
        return False, "Nome deve ter no máximo 100 caracteres"
    return True, ""


def validate_email(email: Any) -> Tuple[bool, str]:
    """
    Validate corporate email.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "E-mail inválido") if the address is malformed
        - (False, "E-mail deve ter no máximo 255 caracteres") if too long
    """
    cleaned = _clean(email)
    if not EMAIL_PATTERN.match(cleaned):
        return False, "E-mail inválido"
    if len(cleaned) > EMAIL_MAX_LENGTH:
        return False, "E-mail deve ter no máximo 255 caracteres"
    return True, ""


def validate_department(department: Any) -> Tuple[bool, str]:
    """Department must be one of the configured names."""
    cleaned = _clean(department)
    if not cleaned:
        return False, "Selecione um departamento"
    if cleaned not in DEPARTMENTS:
        return False, "Departamento inválido"
    return True, ""


def validate_automation_level(level: Any) -> Tuple[bool, str]:
    """Automation level must be one of baixo / medio / alto."""
    cleaned = _clean(level)
    if not cleaned:
        return False, "Selecione o nível de familiaridade"
    if cleaned not in AUTOMATION_LEVEL_LABELS:
        return False, "Nível de familiaridade inválido"
    return True, ""


def validate_participation_day(
    day: Any,
    date_range: Optional[Tuple[date, date]] = None,
) -> Tuple[bool, str]:
    """
    Validate participation day against the inclusive event window.

    Args:
        day: date, datetime or YYYY-MM-DD string
        date_range: (start, end); defaults to the configured event range

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    if day is None or (isinstance(day, str) and not day.strip()):
        return False, "Selecione o dia de participação"

    try:
        parsed = parse_day(day)
    except (ValueError, TypeError):
        return False, "Data inválida"

    start, end = date_range or get_event_date_range()
    if not is_within_range(parsed, start, end):
        return False, f"Selecione um dia entre {format_day(start)} e {format_day(end)}"

    return True, ""


def validate_optional_text(value: Any, max_length: int, message: str) -> Tuple[bool, str]:
    """Optional free text: absent is fine, otherwise at most max_length after trimming."""
    if value is None:
        return True, ""
    if not isinstance(value, str):
        return False, message
    if len(value.strip()) > max_length:
        return False, message
    return True, ""


def validate_registration(
    candidate: Dict[str, Any],
    date_range: Optional[Tuple[date, date]] = None,
) -> Tuple[Optional[Registration], List[FieldError]]:
    """
    Validate a candidate registration.

    Every field is checked independently and all violations are collected.
    The accessibility cross-field rule runs last. A stray accessibility
    detail with needs_accessibility False is not an error.

    Args:
        candidate: Dictionary with registration form fields
        date_range: Optional (start, end) override for the event window

    Returns:
        (Registration, []) when valid, with trimmed values and empty
        optional text normalized to None; (None, errors) otherwise.
    """
    errors: List[FieldError] = []

    def check(field_name: str, result: Tuple[bool, str]) -> None:
        is_valid, message = result
        if not is_valid:
            errors.append(FieldError(field_name, message))

    check("full_name", validate_full_name(candidate.get("full_name")))
    check("corporate_email", validate_email(candidate.get("corporate_email")))
    check("department", validate_department(candidate.get("department")))
    check("automation_level", validate_automation_level(candidate.get("automation_level")))

    needs_accessibility = candidate.get("needs_accessibility")
    if not isinstance(needs_accessibility, bool):
        errors.append(FieldError("needs_accessibility", "Informe se precisa de acessibilidade"))

    # The detail only matters when accessibility was requested
    if needs_accessibility is True:
        check(
            "accessibility_detail",
            validate_optional_text(
                candidate.get("accessibility_detail"),
                ACCESSIBILITY_DETAIL_MAX_LENGTH,
                "Descrição deve ter no máximo 500 caracteres",
            ),
        )
    check(
        "participation_day",
        validate_participation_day(candidate.get("participation_day"), date_range),
    )
    check(
        "notes",
        validate_optional_text(
            candidate.get("notes"),
            NOTES_MAX_LENGTH,
            "Observações devem ter no máximo 1000 caracteres",
        ),
    )

    # Cross-field rule: one direction only
    detail = _clean(candidate.get("accessibility_detail"))
    if needs_accessibility is True and not detail:
        errors.append(FieldError("accessibility_detail", ACCESSIBILITY_DETAIL_REQUIRED))

    if errors:
        return None, errors

    registration = Registration(
        full_name=_clean(candidate["full_name"]),
        corporate_email=_clean(candidate["corporate_email"]),
        department=_clean(candidate["department"]),
        automation_level=_clean(candidate["automation_level"]),
        needs_accessibility=needs_accessibility,
        participation_day=parse_day(candidate["participation_day"]).isoformat(),
        accessibility_detail=detail or None,
        notes=_clean(candidate.get("notes")) or None,
    )
    return registration, []


def errors_by_field(errors: List[FieldError]) -> Dict[str, List[str]]:
    """Group error messages by field name, preserving order."""
    grouped: Dict[str, List[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    return grouped


def validate_login(username: Any, password: Any) -> List[FieldError]:
    """
    Validate HR login input before checking credentials.

    Returns:
        List of FieldError, empty when the input is well formed
    """
    errors: List[FieldError] = []
    if not _clean(username):
        errors.append(FieldError("username", "Informe o usuário"))

    password = password if isinstance(password, str) else ""
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(FieldError("password", "Senha deve ter pelo menos 6 caracteres"))
    elif len(password) > PASSWORD_MAX_LENGTH:
        errors.append(FieldError("password", "Senha deve ter no máximo 100 caracteres"))
    return errors
