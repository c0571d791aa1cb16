import pytest

from territory_helper import state as session
from territory_helper.models import Territory


@pytest.fixture
def state():
    s = {}
    session.init_session_state(s)
    return s


def test_init_is_idempotent(state):
    territory = state["territory"]
    session.init_session_state(state)
    assert state["territory"] is territory
    assert isinstance(territory, Territory)
    assert state["form_error"] is None


def test_submit_street_commits_and_clears(state):
    state[session.STREET_NAME_KEY] = "Main"
    state[session.HOUSE_COUNT_KEY] = 3
    session.submit_street(state)

    assert [(s.name, s.numbers) for s in state["territory"].streets] == [("Main", ["1", "2", "3"])]
    assert state[session.STREET_NAME_KEY] == ""
    assert state[session.HOUSE_COUNT_KEY] is None
    assert session.get_field(state, session.STREET_NAME_KEY).value == ""


@pytest.mark.parametrize("name, count", [("", 3), ("Main", None)])
def test_submit_street_requires_both_fields(state, name, count):
    state[session.STREET_NAME_KEY] = name
    state[session.HOUSE_COUNT_KEY] = count
    session.submit_street(state)

    assert state["territory"].streets == []
    assert state["form_error"] == session.MISSING_FIELDS_MESSAGE
    assert state[session.STREET_NAME_KEY] == name


def test_error_clears_after_valid_submit(state):
    session.submit_street(state)
    state[session.STREET_NAME_KEY] = "Main"
    state[session.HOUSE_COUNT_KEY] = 0
    session.submit_street(state)
    assert state["form_error"] is None
    assert state["territory"].streets[0].numbers == []


def test_rename_territory(state):
    state[session.TERRITORY_NAME_KEY] = "Nord"
    session.rename_territory(state)
    assert state["territory"].name == "Nord"


def test_variant_button_hidden_after_use(state):
    state["territory"].add_street("S", 2)
    assert session.show_variant_button(state, 0, "2")

    session.add_variant(state, 0, "S", "2")
    assert state["territory"].streets[0].numbers == ["1", "2", "2a"]
    assert not session.show_variant_button(state, 0, "2")
    assert session.show_variant_button(state, 0, "2a")
    assert not session.show_variant_button(state, 0, "2c")


def test_remove_number(state):
    state["territory"].add_street("S", 2)
    session.remove_number(state, "S", "1")
    assert state["territory"].streets[0].numbers == ["2"]
