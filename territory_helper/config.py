"""
Configuration utilities for the Streamlit app.
Handles page setup, settings lookup and logging.
"""

import logging
import os
import streamlit as st
from typing import Optional


PAGE_TITLE = "Territory Helper"
PAGE_ICON = "🗺"

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLSX_EXTENSION = ".xlsx"
SHEET_NAME = "data"

DEFAULT_GRID_COLUMNS = 6
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# -------------------------
# Page setup
# -------------------------

def setup_page() -> None:
    """Configure Streamlit page and title."""
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
    st.title(f"{PAGE_ICON} {PAGE_TITLE}")


# -------------------------
# Settings
# -------------------------

def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Fetch a setting from Streamlit secrets ([territory] table) or TERRITORY_<name> in the environment."""
    try:
        return str(st.secrets["territory"][name])
    except Exception:
        return os.environ.get(f"TERRITORY_{name}", default)


def get_log_level() -> str:
    return (get_setting("LOG_LEVEL", "INFO") or "INFO").upper()


def get_grid_columns() -> int:
    """Number of house cards per row; falls back to the default on bad values."""
    raw = get_setting("GRID_COLUMNS")
    try:
        columns = int(raw) if raw is not None else DEFAULT_GRID_COLUMNS
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring invalid GRID_COLUMNS %r", raw)
        return DEFAULT_GRID_COLUMNS
    return columns if columns > 0 else DEFAULT_GRID_COLUMNS


# -------------------------
# Logging
# -------------------------

def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach one stream handler to the package logger; safe to call on every rerun."""
    logger = logging.getLogger("territory_helper")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    try:
        logger.setLevel(level or get_log_level())
    except ValueError:
        logger.setLevel(logging.INFO)
        logger.warning("Unknown log level %r, using INFO", level or get_log_level())
    return logger
