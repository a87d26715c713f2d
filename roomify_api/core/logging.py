# File: roomify_api/core/logging.py

import logging

from roomify_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once for the API process.

    Modules log through ``logging.getLogger(__name__)``; this only sets the
    level and format.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    if settings.debug:
        logging.getLogger("roomify_api").setLevel(logging.DEBUG)
