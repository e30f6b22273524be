import logging

from sentences.config import settings


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging. DEBUG in debug mode, otherwise LOG_LEVEL."""
    if level is None:
        level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
