import logging
from typing import Optional

from app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the app process.

    Modules log through `logging.getLogger(__name__)`; this only sets the
    level and format. Uvicorn's own loggers are left alone.
    """
    level_name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=level_name, format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level_name)
