import logging

from relatime.config import settings


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for applications embedding relatime."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=settings.log_format,
    )
