"""HR dashboard: stats, charts, filters, table, export, edit and delete."""
import logging
import traceback
from datetime import date
from typing import Dict, Optional, Sequence

import streamlit as st

from src.models.registration import Registration
from src.services.analytics_service import (
    automation_level_chart_rows,
    day_chart_rows,
    department_chart_rows,
    filter_by,
    summarize,
)
from src.services.auth_service import is_hr_authenticated, login_hr, logout_hr
from src.services.export_service import encode_csv, export_filename
from src.services.registration_service import (
    edit_registration,
    load_registrations,
    remove_registration,
)
from src.utils.constants import ALL_FILTER, AUTOMATION_LEVEL_LABELS, DEPARTMENTS
from src.utils.date_utils import format_day, format_timestamp
from src.utils.validation import errors_by_field, validate_login
from src.ui.form_fields import clear_registration_fields, render_registration_fields
from src.ui.html_utils import field_error_html, html_block, stat_card_html

logger = logging.getLogger(__name__)

FEEDBACK_KEY = "dashboard_feedback"
EDITING_KEY = "dashboard_editing_id"
DELETING_KEY = "dashboard_deleting_id"
EDIT_ERRORS_KEY = "dashboard_edit_errors"
FILTER_DEPARTMENT_KEY = "dashboard_filter_department"
FILTER_DAY_KEY = "dashboard_filter_day"
EDIT_PREFIX = "dashboard_edit"


def _show_dashboard_exception(error: Exception, context: str) -> None:
    """Display error details in UI and log full traceback."""
    logger.exception("Dashboard error during %s", context)

    st.error(f"❌ Erro ao {context}")
    with st.expander("🔍 Detalhes do erro"):
        st.code("".join(traceback.format_exception(type(error), error, error.__traceback__)))


def _table_row(registration: Registration) -> Dict[str, str]:
    """Display values for one registration in the list."""
    return {
        "Nome": registration.full_name,
        "E-mail": registration.corporate_email,
        "Departamento": registration.department,
        "Nível": AUTOMATION_LEVEL_LABELS.get(registration.automation_level, registration.automation_level),
        "Acessibilidade": "Sim" if registration.needs_accessibility else "Não",
        "Dia": format_day(registration.participation_day),
        "Inscrito em": format_timestamp(registration.created_at) if registration.created_at else "",
    }


def _filters_active(department: Optional[str], day: Optional[date]) -> bool:
    return (department not in (None, ALL_FILTER)) or day is not None


def _showing_caption(shown: int, total: int) -> str:
    return f"Exibindo {shown} de {total} inscrições"


def _set_feedback(level: str, message: str) -> None:
    st.session_state[FEEDBACK_KEY] = (level, message)


def _render_feedback() -> None:
    feedback = st.session_state.pop(FEEDBACK_KEY, None)
    if not feedback:
        return
    level, message = feedback
    if level == "success":
        st.success(message)
    elif level == "error":
        st.error(message)
    else:
        st.info(message)


def _clear_filters() -> None:
    """on_click callback; runs before the filter widgets are re-created."""
    st.session_state[FILTER_DEPARTMENT_KEY] = ALL_FILTER
    st.session_state[FILTER_DAY_KEY] = None


def _inject_dashboard_styles() -> None:
    st.markdown(
        html_block(
            """
            <style>
            .stat-card {
                background: rgba(15, 17, 40, 0.92);
                border: 1px solid rgba(148, 163, 184, 0.18);
                border-radius: 16px;
                padding: 18px 20px;
            }
            .stat-card__title {
                color: #94a3b8;
                font-size: 13px;
                font-weight: 600;
            }
            .stat-card__value {
                color: #f8fafc;
                font-size: 30px;
                font-weight: 800;
            }
            .stat-card__caption {
                color: #94a3b8;
                font-size: 12px;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def render_login_page() -> None:
    """Render the HR login form."""
    with st.form("hr_login_form", clear_on_submit=False):
        st.markdown("### 🔐 Área RH")
        st.caption("Entre com suas credenciais para acessar o dashboard")

        username = st.text_input("Usuário", key="hr_username_input")
        password = st.text_input("Senha", type="password", key="hr_password_input")

        submit_col, cancel_col = st.columns(2, gap="small")
        with submit_col:
            submit = st.form_submit_button("Entrar", type="primary", width="stretch")
        with cancel_col:
            cancel = st.form_submit_button("Voltar", width="stretch")

        if submit:
            login_errors = validate_login(username, password)
            if login_errors:
                for error in login_errors:
                    st.markdown(field_error_html(error.message), unsafe_allow_html=True)
            else:
                success, message = login_hr(username, password)
                if success:
                    st.success(f"✅ {message}")
                    st.rerun()
                else:
                    st.error(f"❌ {message}")

        if cancel:
            st.session_state.current_page = "form"
            st.rerun()


def _render_stats(records: Sequence[Registration]) -> None:
    summary = summarize(records)
    cols = st.columns(3, gap="small")
    with cols[0]:
        st.markdown(stat_card_html("👥 Total de Inscritos", summary.total), unsafe_allow_html=True)
    with cols[1]:
        st.markdown(
            stat_card_html("🏢 Departamentos", summary.departments_with_registrants, "com inscritos"),
            unsafe_allow_html=True,
        )
    with cols[2]:
        st.markdown(
            stat_card_html("♿ Acessibilidade", summary.with_accessibility, "precisam de acessibilidade"),
            unsafe_allow_html=True,
        )


def _render_charts(records: Sequence[Registration]) -> None:
    if not records:
        return

    left, right = st.columns(2, gap="medium")
    with left:
        st.markdown("**Inscrições por Departamento**")
        st.bar_chart(department_chart_rows(records), x="Departamento", y="Total", horizontal=True)
    with right:
        st.markdown("**Nível de Familiaridade com Automação**")
        st.bar_chart(automation_level_chart_rows(records), x="Nível", y="Total")

    day_rows = day_chart_rows(records)
    if len(day_rows) > 1:
        st.markdown("**Inscrições por Dia de Participação**")
        st.bar_chart(day_rows, x="Dia", y="Total")


def _render_table(records: Sequence[Registration], total: int) -> None:
    if not records:
        st.info("Nenhuma inscrição encontrada")
        return

    headers = list(_table_row(records[0]).keys()) + ["Ações"]
    widths = [2, 2.2, 1.2, 1, 1, 1, 1.4, 1]
    header_cols = st.columns(widths, gap="small")
    for col, title in zip(header_cols, headers):
        col.markdown(f"**{title}**")

    for registration in records:
        cols = st.columns(widths, gap="small")
        for col, value in zip(cols, _table_row(registration).values()):
            col.text(value)
        with cols[-1]:
            edit_col, delete_col = st.columns(2, gap="small")
            with edit_col:
                if st.button("✏️", key=f"edit_{registration.id}", help="Editar"):
                    clear_registration_fields(EDIT_PREFIX)
                    st.session_state[EDIT_ERRORS_KEY] = {}
                    st.session_state[EDITING_KEY] = registration.id
                    st.session_state.pop(DELETING_KEY, None)
            with delete_col:
                if st.button("🗑️", key=f"delete_{registration.id}", help="Excluir"):
                    st.session_state[DELETING_KEY] = registration.id
                    st.session_state.pop(EDITING_KEY, None)

    st.caption(_showing_caption(len(records), total))


def _find(records: Sequence[Registration], registration_id: Optional[str]) -> Optional[Registration]:
    for registration in records:
        if registration.id == registration_id:
            return registration
    return None


def render_edit_form(records: Sequence[Registration]) -> None:
    """Render the full-record edit form for the selected registration."""
    registration = _find(records, st.session_state.get(EDITING_KEY))
    if registration is None:
        _set_feedback("error", "❌ Inscrição não encontrada")
        st.session_state.pop(EDITING_KEY, None)
        st.rerun()
        return

    st.markdown("### ✏️ Editar inscrição")
    st.caption(f"Inscrito em {format_timestamp(registration.created_at)}" if registration.created_at else "")

    errors = st.session_state.get(EDIT_ERRORS_KEY, {})
    values = render_registration_fields(EDIT_PREFIX, defaults=registration.form_values(), errors=errors)

    save_col, cancel_col = st.columns(2, gap="small")
    with save_col:
        if st.button("💾 Salvar alterações", type="primary", width="stretch", key="dashboard_edit_save"):
            success, message, field_errors = edit_registration(registration.id, values)
            if success:
                _set_feedback("success", f"✅ {message}")
                st.session_state.pop(EDITING_KEY, None)
                st.session_state[EDIT_ERRORS_KEY] = {}
                clear_registration_fields(EDIT_PREFIX)
                st.rerun()
            elif field_errors:
                st.session_state[EDIT_ERRORS_KEY] = errors_by_field(field_errors)
                st.rerun()
            else:
                st.error(f"❌ {message}")
    with cancel_col:
        if st.button("❌ Cancelar", width="stretch", key="dashboard_edit_cancel"):
            st.session_state.pop(EDITING_KEY, None)
            st.session_state[EDIT_ERRORS_KEY] = {}
            clear_registration_fields(EDIT_PREFIX)
            st.rerun()


def render_delete_confirmation(records: Sequence[Registration]) -> None:
    """Ask for confirmation before deleting a registration."""
    registration = _find(records, st.session_state.get(DELETING_KEY))
    if registration is None:
        st.session_state.pop(DELETING_KEY, None)
        return

    st.error(
        f"⚠️ Tem certeza que deseja excluir a inscrição de **{registration.full_name}**? "
        "Esta ação não pode ser desfeita."
    )
    confirm_col, cancel_col = st.columns(2, gap="small")
    with confirm_col:
        if st.button("✅ Excluir", type="primary", width="stretch", key=f"confirm_delete_{registration.id}"):
            success, message = remove_registration(registration.id)
            _set_feedback("success" if success else "error", f"{'✅' if success else '❌'} {message}")
            st.session_state.pop(DELETING_KEY, None)
            st.rerun()
    with cancel_col:
        if st.button("❌ Cancelar", width="stretch", key=f"cancel_delete_{registration.id}"):
            st.session_state.pop(DELETING_KEY, None)
            st.rerun()


def render_dashboard() -> None:
    """Render the HR dashboard, or the login form when not authenticated."""
    try:
        if not is_hr_authenticated():
            render_login_page()
            return

        _inject_dashboard_styles()
        _render_feedback()

        title_col, logout_col = st.columns([4, 1], gap="small")
        with title_col:
            st.markdown("## 📊 Dashboard RH")
            st.caption("Gerenciamento de Inscrições")
        with logout_col:
            if st.button("🚪 Sair", width="stretch", key="dashboard_logout"):
                logout_hr()
                st.session_state.current_page = "form"
                st.rerun()

        records, load_error = load_registrations()
        if load_error:
            st.error(f"❌ {load_error}")
            if st.button("🔄 Tentar novamente", key="dashboard_retry"):
                st.rerun()
            return

        _render_stats(records)
        _render_charts(records)

        st.markdown("### Lista de Inscritos")
        if FILTER_DEPARTMENT_KEY not in st.session_state:
            st.session_state[FILTER_DEPARTMENT_KEY] = ALL_FILTER

        filter_cols = st.columns([1.4, 1.4, 1, 1], gap="small")
        with filter_cols[0]:
            department = st.selectbox(
                "Departamento",
                [ALL_FILTER] + DEPARTMENTS,
                format_func=lambda value: "Todos" if value == ALL_FILTER else value,
                key=FILTER_DEPARTMENT_KEY,
            )
        with filter_cols[1]:
            day = st.date_input("Data", value=None, format="DD/MM/YYYY", key=FILTER_DAY_KEY)

        filtered = filter_by(records, department=department, day=day)

        with filter_cols[2]:
            if _filters_active(department, day):
                st.button("Limpar filtros", on_click=_clear_filters, width="stretch", key="dashboard_clear_filters")
        with filter_cols[3]:
            st.download_button(
                "⬇️ Exportar CSV",
                data=encode_csv(filtered),
                file_name=export_filename(),
                mime="text/csv",
                width="stretch",
                key="dashboard_export",
            )

        _render_table(filtered, len(records))

        if st.session_state.get(EDITING_KEY):
            render_edit_form(records)
        elif st.session_state.get(DELETING_KEY):
            render_delete_confirmation(records)
    except Exception as error:
        _show_dashboard_exception(error, "carregar o dashboard")
