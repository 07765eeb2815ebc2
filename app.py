"""Streamlit entry point: ``streamlit run app.py``."""

from __future__ import annotations

import logging

from shared.config import DailyTimedRotatingFileHandler, configure_logging
from shared.logging_utils import silence_streamlit_warnings
from ui.page import render_portfolio_page


def _init_logging() -> None:
    # Streamlit re-executes this script on every interaction.
    root = logging.getLogger()
    if any(isinstance(handler, DailyTimedRotatingFileHandler) for handler in root.handlers):
        return
    configure_logging()
    silence_streamlit_warnings()


def main() -> None:
    """Configure logging and render the portfolio page."""

    _init_logging()
    render_portfolio_page()


if __name__ == "__main__":
    main()
