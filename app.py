"""
Workshop de Automação Corporativa: inscrições
Event registration form and HR dashboard
"""
import logging
import os

import streamlit as st

from src.ui.dashboard import render_dashboard
from src.ui.registration_form import render_registration_form
from src.utils.env import load_env

logger = logging.getLogger(__name__)


st.set_page_config(
    page_title="Workshop de Automação",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def configure_logging():
    """Set the root log level from LOG_LEVEL (default INFO)."""
    load_env()
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def initialize_session_state():
    """Initialize session state defaults."""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "form"

    if "hr_authenticated" not in st.session_state:
        st.session_state.hr_authenticated = False

    # ?page=dashboard opens the HR area directly
    if "url_params_processed" not in st.session_state:
        if st.query_params.get("page") == "dashboard":
            st.session_state.current_page = "dashboard"
        st.session_state.url_params_processed = True


def apply_custom_css():
    """Global styles."""
    st.markdown("""
        <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 10px;
            font-weight: 600;
        }

        .page-heading {
            text-align: center;
            margin-bottom: 12px;
        }
        .page-heading__title {
            font-size: 28px;
            font-weight: 800;
            margin: 0;
        }
        .page-heading__desc {
            color: #64748b;
            font-size: 13px;
        }

        .field-error {
            color: #ef4444;
            font-size: 13px;
            margin-top: -8px;
            margin-bottom: 8px;
        }
        </style>
    """, unsafe_allow_html=True)


def render_navigation():
    """Render the top navigation."""
    nav_col1, _spacer, nav_col2 = st.columns([1, 3, 1], gap="small")

    with nav_col1:
        if st.button("📝 Inscrição", width="stretch", key="nav_form"):
            st.session_state.current_page = "form"

    with nav_col2:
        if st.button("🛡️ Área RH", width="stretch", key="nav_dashboard"):
            st.session_state.current_page = "dashboard"


def render_current_page():
    """Render the page selected in session state."""
    try:
        if st.session_state.current_page == "form":
            render_registration_form()

        elif st.session_state.current_page == "dashboard":
            render_dashboard()

        else:
            st.error(f"Página desconhecida: {st.session_state.current_page}")
            if st.button("Voltar ao início"):
                st.session_state.current_page = "form"
                st.rerun()

    except Exception as e:
        logger.exception("Unhandled exception while rendering page")
        st.error("Ocorreu um erro, tente novamente mais tarde")

        with st.expander("🔍 Detalhes do erro"):
            st.code(str(e))

        if st.button("Voltar ao início"):
            st.session_state.current_page = "form"
            st.rerun()


def main():
    """Application entry point."""
    configure_logging()
    try:
        initialize_session_state()
        apply_custom_css()
        render_navigation()
        render_current_page()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("A aplicação encontrou um erro, recarregue a página")
        st.code(str(e))

        if st.button("🔄 Recarregar"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()
