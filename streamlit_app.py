"""
Streamlit entrypoint kept minimal by delegating to the territory_helper package.

Layout:
- territory_helper/config.py: page setup, settings, logging
- territory_helper/state.py: session_state initialization and callbacks
- territory_helper/models.py: streets, territory and their mutations
- territory_helper/services.py: grid transform and .xlsx export
- territory_helper/views/territory.py: the page
- territory_helper/views/cards.py: street blocks and house cards

Run:
  streamlit run streamlit_app.py
"""

from territory_helper.config import setup_page, configure_logging
from territory_helper.state import init_session_state
from territory_helper.views.territory import render_territory


def main() -> None:
    # Page config and title
    setup_page()
    configure_logging()

    # Initialize session state keys
    init_session_state()

    render_territory()


if __name__ == "__main__":
    main()
