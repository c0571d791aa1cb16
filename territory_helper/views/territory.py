"""
Territory view: name field and street form on the left, streets and export on the right.
"""

import streamlit as st

from territory_helper import state as session
from territory_helper.config import get_grid_columns
from territory_helper.errors import ExportError
from territory_helper.services import export_territory
from territory_helper.views.cards import escape_markdown, render_street_block


def render_territory() -> None:
    """Top-level renderer with the input column and the street grid column."""
    col_left, col_right = st.columns([1, 3], gap="large")

    with col_left:
        _render_inputs()

    with col_right:
        _render_streets()
        _render_export()


def _render_inputs() -> None:
    fields = st.session_state["fields"]

    st.text_input(
        "Gebietsname",
        key=session.TERRITORY_NAME_KEY,
        on_change=session.rename_territory,
        args=(st.session_state,),
    )

    st.markdown("#### Straßen")
    st.text_input("Straße", **fields[session.STREET_NAME_KEY].bind(st.session_state))
    st.number_input(
        "Hausnummern",
        value=None,
        step=1,
        **fields[session.HOUSE_COUNT_KEY].bind(st.session_state),
    )

    st.button("Hinzufügen", type="primary", on_click=session.submit_street, args=(st.session_state,))
    if st.session_state["form_error"]:
        st.error(st.session_state["form_error"])


def _render_streets() -> None:
    territory = session.get_territory(st.session_state)
    st.markdown(f"### {escape_markdown(territory.name)}")

    columns = get_grid_columns()
    for i, street in enumerate(territory.streets):
        render_street_block(i, street, columns)


# -------------------------
# Export
# -------------------------

def _render_export() -> None:
    territory = session.get_territory(st.session_state)
    if not territory.streets:
        return

    try:
        artifact = export_territory(territory)
    except ExportError as e:
        st.error(f"Export fehlgeschlagen: {e}")
        return

    st.download_button(
        "Zu Excel exportieren",
        data=artifact.data,
        file_name=artifact.filename,
        mime=artifact.mime,
    )
