"""
Draft values for form inputs.
A FormField holds one editable string and can be reset to its starting value.
"""

from typing import Any, Dict, MutableMapping


class FormField:
    """One form input's value, with reset-to-initial semantics."""

    def __init__(self, key: str, initial_value: str = "") -> None:
        self.key = key
        self.initial_value = initial_value
        self.value = initial_value

    def __repr__(self) -> str:
        return f"FormField(key={self.key!r}, value={self.value!r})"

    def set_from_input(self, raw: str) -> None:
        self.value = raw

    def reset(self) -> None:
        self.value = self.initial_value

    def bind(self, session_state: MutableMapping[str, Any]) -> Dict[str, Any]:
        """
        Keyword arguments wiring a widget to this field.
        The widget keeps its own slot under `key`; edits are copied back on change.
        """
        return {"key": self.key, "on_change": self.read_widget, "args": (session_state,)}

    # -------------------------
    # Streamlit widget glue
    # -------------------------

    def read_widget(self, session_state: MutableMapping[str, Any]) -> None:
        """Copy the widget's current value into the field (None reads as blank)."""
        raw = session_state.get(self.key)
        self.set_from_input("" if raw is None else str(raw))

    def reset_widget(self, session_state: MutableMapping[str, Any], blank: Any = "") -> None:
        """
        Reset the field and push the reset value into the widget slot.
        Must run inside a widget callback, before the widget is drawn again.
        `blank` is what an empty value looks like to the widget (None for number inputs).
        """
        self.reset()
        session_state[self.key] = self.value if self.value != "" else blank
