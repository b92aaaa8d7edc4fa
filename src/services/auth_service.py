"""HR authentication and dashboard session state."""
import hmac
import os
from typing import Tuple

import streamlit as st

from src.utils.env import load_env

SESSION_KEY = "hr_authenticated"


def authenticate_hr(username: str, password: str) -> bool:
    """
    Check HR credentials against HR_USERNAME / HR_PASSWORD.

    Args:
        username: Submitted username
        password: Submitted password

    Returns:
        True if both match, False otherwise. An unset password never matches.
    """
    load_env()

    hr_username = os.getenv("HR_USERNAME", "rh")
    hr_password = os.getenv("HR_PASSWORD", "")
    if not hr_password:
        return False

    username_ok = hmac.compare_digest(username.encode("utf-8"), hr_username.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), hr_password.encode("utf-8"))
    return username_ok and password_ok


def is_hr_authenticated() -> bool:
    """True if st.session_state marks the current browser session as logged in."""
    return st.session_state.get(SESSION_KEY, False)


def login_hr(username: str, password: str) -> Tuple[bool, str]:
    """
    Log in an HR user.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "Login realizado com sucesso") on success
        - (False, "Usuário ou senha inválidos") on failure
    """
    if authenticate_hr(username, password):
        st.session_state[SESSION_KEY] = True
        return True, "Login realizado com sucesso"
    return False, "Usuário ou senha inválidos"


def logout_hr() -> None:
    """Clear the login flag and any dashboard state derived from it."""
    for key in (SESSION_KEY, "dashboard_editing_id", "dashboard_deleting_id"):
        if key in st.session_state:
            del st.session_state[key]
