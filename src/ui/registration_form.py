"""Public registration form page."""
import streamlit as st

from src.services.registration_service import submit_registration
from src.utils.constants import get_event_date_range
from src.utils.date_utils import format_day
from src.utils.validation import errors_by_field
from src.ui.form_fields import clear_registration_fields, render_registration_fields
from src.ui.html_utils import html_block

FORM_PREFIX = "registration_form"
ERRORS_KEY = "registration_errors"
SUCCESS_KEY = "registration_submitted"


def _render_header() -> None:
    start, end = get_event_date_range()
    st.markdown(
        html_block(
            f"""
            <div class="page-heading">
                <h1 class="page-heading__title">Inscrição para o Evento</h1>
                <div class="page-heading__desc">
                    Workshop de Automação Corporativa · {format_day(start)} a {format_day(end)}
                </div>
            </div>
            """
        ),
        unsafe_allow_html=True,
    )
    st.caption(
        "Preencha o formulário abaixo para confirmar sua participação no "
        "Workshop de Automação Corporativa."
    )


def _render_success() -> None:
    st.success("✅ Inscrição enviada com sucesso!")
    st.markdown(
        "Obrigado por se inscrever. Você receberá mais informações sobre o evento "
        "no seu e-mail corporativo."
    )
    if st.button("Fazer nova inscrição", key="registration_new"):
        st.session_state[SUCCESS_KEY] = False
        clear_registration_fields(FORM_PREFIX)
        st.rerun()


def render_registration_form() -> None:
    """Render the public sign-up form."""
    _render_header()

    if st.session_state.get(SUCCESS_KEY):
        _render_success()
        return

    errors = st.session_state.get(ERRORS_KEY, {})
    values = render_registration_fields(FORM_PREFIX, errors=errors)
    if errors:
        st.warning("⚠️ Corrija os campos destacados")

    if st.button("Confirmar inscrição", type="primary", width="stretch", key="registration_submit"):
        success, message, field_errors = submit_registration(values)
        if success:
            st.session_state[ERRORS_KEY] = {}
            st.session_state[SUCCESS_KEY] = True
            st.rerun()
        elif field_errors:
            st.session_state[ERRORS_KEY] = errors_by_field(field_errors)
            st.rerun()
        else:
            st.session_state[ERRORS_KEY] = {}
            st.error(f"❌ {message}")

    st.caption("Ao se inscrever, você concorda com os termos de uso e política de privacidade.")
