"""
Design (models.py)
- Purpose: Territory and Street containers plus the mutations the UI performs on them.
- Inputs: Street names, house counts and house-number labels (str).
- Outputs: Dataclass instances; mutations report what they changed.
- Side effects: A mutation replaces the affected street's `numbers` with a new list.
- Failure policy: Nothing here raises. Unknown streets or numbers are logged no-ops.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)

VARIANT_SUFFIXES = ["a", "b", "c"]


@dataclass
class Street:
    """
    Design (Street)
    - Fields:
        name: Street name, used as the lookup key (first match wins on duplicates).
        numbers: House-number labels in display order, variants right after their base.
    """
    name: str
    numbers: List[str] = field(default_factory=list)


def parse_house_count(raw: str) -> int:
    """
    Convert the house-count input into a loop bound.
    Blank, unparsable and non-finite input count as 0; fractions are truncated.
    """
    text = str(raw).strip()
    if not text:
        return 0
    try:
        value = float(text)
    except ValueError:
        logger.debug("Unparsable house count %r treated as 0", raw)
        return 0
    if not math.isfinite(value):
        logger.debug("Non-finite house count %r treated as 0", raw)
        return 0
    return math.floor(value)


def house_numbers(count: int) -> List[str]:
    return [str(i) for i in range(1, count + 1)]


def next_variant(number: str) -> Optional[str]:
    """Label of the next variant after `number`, or None once `c` is reached."""
    last = number[-1:]
    if last not in VARIANT_SUFFIXES:
        return f"{number}a"
    idx = VARIANT_SUFFIXES.index(last) + 1
    if idx >= len(VARIANT_SUFFIXES):
        return None
    return f"{number[:-1]}{VARIANT_SUFFIXES[idx]}"


def can_add_variant(number: str) -> bool:
    return next_variant(number) is not None


@dataclass
class Territory:
    """
    Design (Territory)
    - State:
        name: Free text shown above the streets and used for the export filename.
        streets: Streets in insertion order (display and export column order).
    - Single owner: one instance per browser session, held in session_state.
    """
    name: str = ""
    streets: List[Street] = field(default_factory=list)

    def find_street(self, name: str) -> Optional[Street]:
        for street in self.streets:
            if street.name == name:
                return street
        return None

    def add_street(self, name: str, count: int) -> Street:
        street = Street(name=name, numbers=house_numbers(count))
        self.streets = [*self.streets, street]
        logger.info("Added street %r with %d houses", name, len(street.numbers))
        return street

    def add_variant(self, street_name: str, number: str) -> Optional[str]:
        """
        Insert the next variant of `number` right after it.
        Returns the new label, or None when nothing changed.
        """
        street = self.find_street(street_name)
        if street is None:
            logger.debug("add_variant: no street named %r", street_name)
            return None

        label = next_variant(number)
        if label is None:
            logger.debug("add_variant: %r on %r has no further variants", number, street_name)
            return None

        if number in street.numbers:
            position = street.numbers.index(number) + 1
        else:
            # An absent label lands at the front of the list.
            logger.warning("add_variant: %r not on %r, inserting %r at the start", number, street_name, label)
            position = 0

        street.numbers = [*street.numbers[:position], label, *street.numbers[position:]]
        logger.info("Added variant %r on %r", label, street_name)
        return label

    def remove_number(self, street_name: str, number: str) -> int:
        """Drop every entry equal to `number`. Returns how many were removed."""
        street = self.find_street(street_name)
        if street is None:
            logger.debug("remove_number: no street named %r", street_name)
            return 0

        kept = [n for n in street.numbers if n != number]
        removed = len(street.numbers) - len(kept)
        street.numbers = kept
        if removed:
            logger.info("Removed %r from %r", number, street_name)
        else:
            logger.debug("remove_number: %r not on %r", number, street_name)
        return removed
