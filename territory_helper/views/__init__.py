"""
View layer for the Streamlit app.

Contains the territory page and its street/house card components.
"""
__all__ = ["territory", "cards"]
