"""Logging setup shared by scripts and host applications."""

import logging

from accounts.core.config import Settings, settings as default_settings


def configure_logging(settings: Settings = default_settings) -> None:
    """Configure root logging from settings."""
    level = logging.DEBUG if settings.is_development else getattr(logging, settings.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    # SQL echo is controlled by DEBUG, not by the root level
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
