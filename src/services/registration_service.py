"""Registration service: validate, then read or write the store."""
import logging
from typing import Any, Dict, List, Optional, Tuple

from src.models.registration import Registration
from src.services import registration_store
from src.utils.exceptions import StoreError
from src.utils.validation import FieldError, validate_registration

logger = logging.getLogger(__name__)

MSG_SUBMITTED = "Inscrição enviada com sucesso!"
MSG_UPDATED = "Inscrição atualizada com sucesso!"
MSG_DELETED = "A inscrição foi removida com sucesso."
MSG_FIX_FIELDS = "Corrija os campos destacados"
MSG_NOT_FOUND = "Inscrição não encontrada"
MSG_SUBMIT_FAILED = "Erro ao enviar inscrição. Tente novamente mais tarde."
MSG_UPDATE_FAILED = "Erro ao atualizar inscrição. Tente novamente mais tarde."
MSG_DELETE_FAILED = "Erro ao excluir. Tente novamente mais tarde."
MSG_LOAD_FAILED = "Erro ao carregar inscrições. Tente novamente mais tarde."


def _prepare_for_write(registration: Registration) -> Registration:
    """Drop an accessibility detail sent without the accessibility flag."""
    if not registration.needs_accessibility:
        registration.accessibility_detail = None
    return registration


def submit_registration(form_data: Dict[str, Any]) -> Tuple[bool, str, List[FieldError]]:
    """
    Validate and store a new registration from the public form.

    Args:
        form_data: Raw form values

    Returns:
        Tuple of (success: bool, message: str, errors: List[FieldError])
        - (True, "Inscrição enviada com sucesso!", []) on success
        - (False, "Corrija os campos destacados", errors) on validation failure
        - (False, "Erro ao enviar inscrição...", []) if the store fails
    """
    registration, errors = validate_registration(form_data)
    if errors:
        return False, MSG_FIX_FIELDS, errors

    try:
        new_id = registration_store.create_registration(_prepare_for_write(registration))
    except StoreError as e:
        logger.error(f"Error submitting registration: {e.__cause__ or e}")
        return False, MSG_SUBMIT_FAILED, []

    logger.info("Registration %s created", new_id)
    return True, MSG_SUBMITTED, []


def edit_registration(
    registration_id: str, form_data: Dict[str, Any]
) -> Tuple[bool, str, List[FieldError]]:
    """
    Validate and apply a full-record update from the dashboard.

    Returns:
        Same tuple shape as submit_registration; an unknown ID yields
        (False, "Inscrição não encontrada", [])
    """
    registration, errors = validate_registration(form_data)
    if errors:
        return False, MSG_FIX_FIELDS, errors

    try:
        updated = registration_store.update_registration(
            registration_id, _prepare_for_write(registration)
        )
    except StoreError as e:
        logger.error(f"Error updating registration {registration_id}: {e.__cause__ or e}")
        return False, MSG_UPDATE_FAILED, []

    if not updated:
        return False, MSG_NOT_FOUND, []
    return True, MSG_UPDATED, []


def remove_registration(registration_id: str) -> Tuple[bool, str]:
    """Delete a registration; returns (success, message)."""
    try:
        deleted = registration_store.delete_registration(registration_id)
    except StoreError as e:
        logger.error(f"Error deleting registration {registration_id}: {e.__cause__ or e}")
        return False, MSG_DELETE_FAILED

    if not deleted:
        return False, MSG_NOT_FOUND
    return True, MSG_DELETED


def load_registrations() -> Tuple[List[Registration], Optional[str]]:
    """
    Fetch the current snapshot for the dashboard.

    Returns:
        (registrations, None) on success, ([], error_message) on failure
    """
    try:
        return registration_store.list_registrations(), None
    except StoreError as e:
        logger.error(f"Error fetching registrations: {e.__cause__ or e}")
        return [], MSG_LOAD_FAILED
