from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vacation_calc.config import Settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings. Debug mode forces DEBUG level."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("vacation_calc").setLevel(level)
