"""
Logging configuration for the API.

One stdout handler with a consistent format, installed at app creation.
Request bodies and balances of other profiles are never logged.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level="INFO"):
    """Configure root logging for the application."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Werkzeug's access log duplicates ours at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
