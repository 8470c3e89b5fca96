"""Logging setup shared by the console and Streamlit front-ends."""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
