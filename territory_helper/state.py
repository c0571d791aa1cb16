"""
Session state initialization and helpers.
Keeps Streamlit session_state keys centralized; the callbacks below are the only
places that mutate the territory.
"""

import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from territory_helper.fields import FormField
from territory_helper.models import Territory, can_add_variant, parse_house_count

logger = logging.getLogger(__name__)

SessionState = MutableMapping[str, Any]

# Widget keys double as FormField keys.
TERRITORY_NAME_KEY = "territory_name"
STREET_NAME_KEY = "street_name"
HOUSE_COUNT_KEY = "house_count"

MISSING_FIELDS_MESSAGE = "Bitte Straße und Anzahl der Hausnummern angeben."


def init_session_state(state: Optional[SessionState] = None) -> None:
    """Initialize required session_state keys with defaults if missing."""
    state = st.session_state if state is None else state

    if "territory" not in state:
        state["territory"] = Territory()

    if "fields" not in state:
        state["fields"] = {
            TERRITORY_NAME_KEY: FormField(TERRITORY_NAME_KEY),
            STREET_NAME_KEY: FormField(STREET_NAME_KEY),
            HOUSE_COUNT_KEY: FormField(HOUSE_COUNT_KEY),
        }

    # (street index, label) pairs whose card already added a variant
    if "variant_added" not in state:
        state["variant_added"] = set()

    if "form_error" not in state:
        state["form_error"] = None


def get_territory(state: SessionState) -> Territory:
    return state["territory"]


def get_field(state: SessionState, key: str) -> FormField:
    return state["fields"][key]


# -------------------------
# Callbacks
# -------------------------

def rename_territory(state: SessionState) -> None:
    field = get_field(state, TERRITORY_NAME_KEY)
    field.read_widget(state)
    get_territory(state).name = field.value


def submit_street(state: SessionState) -> None:
    """Commit the street form. Both inputs are required; the form is cleared on success."""
    street_name = get_field(state, STREET_NAME_KEY)
    house_count = get_field(state, HOUSE_COUNT_KEY)
    street_name.read_widget(state)
    house_count.read_widget(state)

    if street_name.value == "" or house_count.value == "":
        state["form_error"] = MISSING_FIELDS_MESSAGE
        return

    get_territory(state).add_street(street_name.value, parse_house_count(house_count.value))
    state["form_error"] = None

    street_name.reset_widget(state)
    house_count.reset_widget(state, blank=None)


def add_variant(state: SessionState, street_index: int, street_name: str, number: str) -> None:
    get_territory(state).add_variant(street_name, number)
    state["variant_added"].add((street_index, number))


def remove_number(state: SessionState, street_name: str, number: str) -> None:
    get_territory(state).remove_number(street_name, number)


def show_variant_button(state: SessionState, street_index: int, number: str) -> bool:
    """Hidden once the label ends in `c` or once this card added a variant."""
    return can_add_variant(number) and (street_index, number) not in state["variant_added"]
