import logging

from lapstats.core.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger; `level` defaults to settings.log_level."""
    log_level = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
