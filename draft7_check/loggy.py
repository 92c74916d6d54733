"""Logging configuration for the application."""

import logging
import warnings

from pydantic.json_schema import PydanticJsonSchemaWarning


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Setup basic logging and return the package logger."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # Suppress fixture generation noise about non-serializable defaults
    warnings.filterwarnings("ignore", category=PydanticJsonSchemaWarning)

    package_logger = logging.getLogger("draft7_check")
    package_logger.setLevel(level)
    return package_logger
