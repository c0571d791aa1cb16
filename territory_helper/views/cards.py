"""
Reusable card components used by the territory view.
A street block renders its house cards in a fixed-width grid.
"""

import re

import streamlit as st

from territory_helper import state as session
from territory_helper.models import Street

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$:])")


def escape_markdown(text: str) -> str:
    """Backslash-escape user text so st.markdown shows it literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


# -------------------------
# House card
# -------------------------

def render_house_card(street_index: int, street_name: str, position: int, number: str) -> None:
    with st.container(border=True):
        st.markdown(f"**{escape_markdown(number)}**")
        c1, c2 = st.columns(2)
        with c1:
            if session.show_variant_button(st.session_state, street_index, number):
                st.button(
                    "👥",
                    key=f"variant_{street_index}_{position}_{number}",
                    help="Variante hinzufügen",
                    on_click=session.add_variant,
                    args=(st.session_state, street_index, street_name, number),
                )
        with c2:
            st.button(
                "🗑",
                key=f"remove_{street_index}_{position}_{number}",
                help="Hausnummer entfernen",
                on_click=session.remove_number,
                args=(st.session_state, street_name, number),
            )


# -------------------------
# Street block
# -------------------------

def render_street_block(street_index: int, street: Street, columns: int) -> None:
    st.markdown(f"#### {escape_markdown(street.name)}")
    for start in range(0, len(street.numbers), columns):
        row = st.columns(columns)
        for offset, (col, number) in enumerate(zip(row, street.numbers[start : start + columns])):
            with col:
                render_house_card(street_index, street.name, start + offset, number)
