"""MP Registry page."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.models.registry.labels import (  # noqa: E402
    CANCEL_EDIT,
    DELETE,
    EDIT,
    FIELD_LABELS,
    PAGE_TITLE,
    RESET,
    SUBMIT_ADD,
    SUBMIT_EDIT,
    TABLE_COLUMNS,
)
from app.services.registry import FormState  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import registry  # noqa: E402

st.set_page_config(page_title=PAGE_TITLE, page_icon="🏛️", layout="wide")

ROW_WIDTHS = [3, 2, 2, 2, 1, 1]


@st.cache_resource(show_spinner=False)
def bootstrap():
    """Logging and the DI container, once per server process."""
    setup_logging(to_file=True, component="app")
    container.init()
    logger.info("Registry ready: {} members", container.registry.count())
    return container


def form_state() -> FormState:
    if "form" not in st.session_state:
        st.session_state["form"] = FormState()
    return st.session_state["form"]


def field_input(state: FormState, name: str, area: bool = False) -> str:
    """Text input bound to one form field, with its inline error below."""
    widget = st.text_area if area else st.text_input
    value = widget(FIELD_LABELS[name], value=state.values.get(name) or "", key=f"{name}_{state.version}")
    if name in state.errors:
        st.error(state.errors[name])
    return value


def member_form(state: FormState):
    """Member form. Widgets are keyed by form version so reset/prefill re-create them."""
    values = {}

    with st.form(f"member_form_{state.version}", clear_on_submit=False):
        col1, col2 = st.columns(2)
        with col1:
            values["prefix"] = field_input(state, "prefix")
            values["last_name"] = field_input(state, "last_name")
            values["department"] = field_input(state, "department")
        with col2:
            values["first_name"] = field_input(state, "first_name")
            values["ministry"] = field_input(state, "ministry")
            values["party"] = field_input(state, "party")

        values["history"] = field_input(state, "history", area=True)
        values["works"] = field_input(state, "works", area=True)

        upload = st.file_uploader(
            FIELD_LABELS["photo"],
            key=f"photo_{state.version}",
        )

        col_submit, col_reset = st.columns(2)
        with col_submit:
            submitted = st.form_submit_button(SUBMIT_EDIT if state.editing else SUBMIT_ADD, type="primary")
        with col_reset:
            reset = st.form_submit_button(RESET)

    if state.values.get("photo"):
        content = registry.get_photo(state.values["photo"])
        if content:
            st.image(content, width=150)

    if state.editing and st.button(CANCEL_EDIT):
        registry.cancel_edit(state)
        st.rerun()

    if reset:
        registry.reset_form(state)
        st.rerun()

    if submitted:
        if upload is not None:
            registry.upload_photo(state, upload.getvalue(), upload.type)

        resp = registry.submit_member(state, values)
        if resp.message:
            st.error(resp.message)
            return
        if resp.saved:
            st.toast(f"✅ {values['prefix']} {values['first_name']} {values['last_name']}")
        st.rerun()


def members_table(state: FormState):
    """Members table with per-row edit/delete."""
    resp = registry.list_members()
    st.subheader(resp.title)

    if resp.empty_message:
        st.info(resp.empty_message)
        return

    header = st.columns(ROW_WIDTHS)
    for col, title in zip(header, TABLE_COLUMNS, strict=False):
        col.markdown(f"**{title}**")

    for row in resp.items:
        cols = st.columns(ROW_WIDTHS)
        cols[0].write(row.full_name)
        cols[1].write(row.ministry)
        cols[2].write(row.department)
        cols[3].write(row.party)

        if cols[4].button(EDIT, key=f"edit_{row.id}"):
            registry.edit_member(state, row.id)
            st.rerun()

        if cols[5].button(DELETE, key=f"delete_{row.id}"):
            registry.delete_member(state, row.id)
            st.rerun()


def main():
    bootstrap()
    state = form_state()

    st.title(f"🏛️ {PAGE_TITLE}")

    with st.container(border=True):
        member_form(state)

    with st.container(border=True):
        members_table(state)


if __name__ == "__main__":
    main()
