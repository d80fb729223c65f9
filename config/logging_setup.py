# Path: config/logging_setup.py
# Purpose: Configure standard-library logging for the gallery core.
# Layer: config.
# Details: Installs a single root handler using the level from AppSettings.

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once; later calls only adjust the level."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
    root.setLevel(numeric)
