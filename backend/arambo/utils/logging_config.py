from __future__ import annotations

import logging

from arambo.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("arambo").setLevel(level)
    # Statement echo is controlled by ``Database(echo=...)``
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
