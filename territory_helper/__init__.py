"""
Territory Helper: organize canvassing territories and export them to Excel.

This package organizes config, state management, the territory model, export
services and views to keep streamlit_app.py small.
"""
__all__ = ["config", "state", "models", "services", "fields", "errors"]
