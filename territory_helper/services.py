"""
Service layer for backend-like operations.
Turns a territory into a rectangular grid and serializes it to an .xlsx workbook.
"""

import logging
import re
import unicodedata
from dataclasses import dataclass
from io import BytesIO
from typing import List, Sequence

from openpyxl import Workbook

from territory_helper.config import SHEET_NAME, XLSX_EXTENSION, XLSX_MIME
from territory_helper.errors import ExportError
from territory_helper.models import Street, Territory

logger = logging.getLogger(__name__)

# Letters NFKD does not decompose into ASCII.
_TRANSLITERATIONS = {
    "ß": "ss",
    "ẞ": "ss",
    "æ": "ae",
    "Æ": "ae",
    "œ": "oe",
    "Œ": "oe",
    "ø": "o",
    "Ø": "o",
    "đ": "d",
    "Đ": "d",
    "ł": "l",
    "Ł": "l",
    "þ": "th",
    "Þ": "th",
}

DEFAULT_FILENAME = "territory"


@dataclass
class ExportArtifact:
    filename: str
    data: bytes
    mime: str = XLSX_MIME


def build_grid(streets: Sequence[Street]) -> List[List[str]]:
    """
    Header row of street names, then one row per house index.
    Shorter streets are padded with empty cells.
    """
    height = max((len(s.numbers) for s in streets), default=0)
    grid = [[s.name for s in streets]]
    for i in range(height):
        grid.append([s.numbers[i] if i < len(s.numbers) else "" for s in streets])
    return grid


def build_workbook(grid: Sequence[Sequence[str]]) -> bytes:
    """Write the grid to a single-sheet workbook. The header row is plain data."""
    try:
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_NAME
        for row in grid:
            ws.append(list(row))
        buffer = BytesIO()
        wb.save(buffer)
    except Exception as e:
        logger.warning("Failed to build workbook: %s", e)
        raise ExportError(f"Could not write spreadsheet: {e}") from e
    return buffer.getvalue()


def slugify(text: str) -> str:
    """Lowercase ASCII slug; runs of anything else become a single dash."""
    text = "".join(_TRANSLITERATIONS.get(ch, ch) for ch in text)
    text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return text.strip("-")


def export_filename(territory_name: str) -> str:
    return (slugify(territory_name) or DEFAULT_FILENAME) + XLSX_EXTENSION


def export_territory(territory: Territory) -> ExportArtifact:
    grid = build_grid(territory.streets)
    data = build_workbook(grid)
    filename = export_filename(territory.name)
    logger.debug("Prepared %s for download: %d streets, %d bytes", filename, len(territory.streets), len(data))
    return ExportArtifact(filename=filename, data=data)
