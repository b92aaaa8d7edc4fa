"""Registration input widgets shared by the public form and the edit form."""
from datetime import date
from typing import Any, Dict, List, Optional

import streamlit as st

from src.utils.constants import AUTOMATION_LEVEL_LABELS, AUTOMATION_LEVELS, DEPARTMENTS, get_event_date_range
from src.utils.date_utils import format_day, parse_day
from src.ui.html_utils import field_error_html

_PLACEHOLDER = ""


def _show_errors(errors: Dict[str, List[str]], field: str) -> None:
    for message in errors.get(field, []):
        st.markdown(field_error_html(message), unsafe_allow_html=True)


def _option_index(options: List[str], value: Optional[str]) -> int:
    try:
        return options.index(value)
    except ValueError:
        return 0


def _initial_day(value: Any, start: date, end: date) -> Optional[date]:
    """Existing day for the date picker, or None if missing or out of range."""
    if not value:
        return None
    try:
        day = parse_day(value)
    except (ValueError, TypeError):
        return None
    return day if start <= day <= end else None


def render_registration_fields(
    prefix: str,
    defaults: Optional[Dict[str, Any]] = None,
    errors: Optional[Dict[str, List[str]]] = None,
) -> Dict[str, Any]:
    """
    Render every registration input and return the current values.

    Args:
        prefix: Widget key prefix, unique per form instance
        defaults: Initial values (field name -> value), e.g. for editing
        errors: Messages per field from the last submit attempt

    Returns:
        Dictionary accepted by validate_registration
    """
    defaults = defaults or {}
    errors = errors or {}
    start, end = get_event_date_range()

    full_name = st.text_input(
        "👤 Nome Completo",
        value=defaults.get("full_name", ""),
        placeholder="Digite seu nome completo",
        key=f"{prefix}_full_name",
    )
    _show_errors(errors, "full_name")

    corporate_email = st.text_input(
        "✉️ E-mail Corporativo",
        value=defaults.get("corporate_email", ""),
        placeholder="seu.nome@empresa.com",
        key=f"{prefix}_corporate_email",
    )
    _show_errors(errors, "corporate_email")

    department_options = [_PLACEHOLDER] + DEPARTMENTS
    department = st.selectbox(
        "🏢 Departamento",
        department_options,
        index=_option_index(department_options, defaults.get("department")),
        format_func=lambda value: value or "Selecione seu departamento",
        key=f"{prefix}_department",
    )
    _show_errors(errors, "department")

    level_options = [value for value, _label in AUTOMATION_LEVELS]
    automation_level = st.radio(
        "⚡ Nível de familiaridade com automação",
        level_options,
        index=level_options.index(defaults["automation_level"])
        if defaults.get("automation_level") in level_options
        else None,
        format_func=lambda value: AUTOMATION_LEVEL_LABELS[value],
        horizontal=True,
        key=f"{prefix}_automation_level",
    )
    _show_errors(errors, "automation_level")

    needs_accessibility = st.checkbox(
        "♿ Necessita de acessibilidade?",
        value=bool(defaults.get("needs_accessibility", False)),
        key=f"{prefix}_needs_accessibility",
    )

    accessibility_detail = None
    if needs_accessibility:
        accessibility_detail = st.text_area(
            "Descreva sua necessidade",
            value=defaults.get("accessibility_detail") or "",
            placeholder="Ex.: intérprete de Libras, acesso para cadeira de rodas...",
            max_chars=500,
            key=f"{prefix}_accessibility_detail",
        )
    _show_errors(errors, "accessibility_detail")

    participation_day = st.date_input(
        "📅 Dia de Participação",
        value=_initial_day(defaults.get("participation_day"), start, end),
        min_value=start,
        max_value=end,
        format="DD/MM/YYYY",
        help=f"Evento de {format_day(start)} a {format_day(end)}",
        key=f"{prefix}_participation_day",
    )
    _show_errors(errors, "participation_day")

    notes = st.text_area(
        "💬 Observações (opcional)",
        value=defaults.get("notes") or "",
        placeholder="Alguma observação adicional?",
        max_chars=1000,
        key=f"{prefix}_notes",
    )
    _show_errors(errors, "notes")

    return {
        "full_name": full_name,
        "corporate_email": corporate_email,
        "department": department,
        "automation_level": automation_level or "",
        "needs_accessibility": needs_accessibility,
        "accessibility_detail": accessibility_detail,
        "participation_day": participation_day,
        "notes": notes,
    }


def clear_registration_fields(prefix: str) -> None:
    """Forget widget state so the next render starts from defaults."""
    for key in list(st.session_state.keys()):
        if isinstance(key, str) and key.startswith(f"{prefix}_"):
            del st.session_state[key]
