"""Exceptions raised by the territory helper."""


class TerritoryError(Exception):
    """Base class for errors surfaced to the user."""


class ExportError(TerritoryError):
    """The spreadsheet could not be built."""
