"""Logging configuration for the dashboard process."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the Streamlit process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    # Disable excessive third-party logging
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("gspread").setLevel(logging.WARNING)
