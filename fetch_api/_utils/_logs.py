import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("fetch_api")

_handler: Optional[logging.Handler] = None


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Send ``fetch_api`` records to stderr.

    The level only ever becomes more verbose, so a client built without
    ``debug`` leaves debug logging of an earlier client in place.
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(_handler)
        logger.propagate = False

    level = logging.DEBUG if should_debug else logging.INFO
    if logger.level == logging.NOTSET or level < logger.level:
        logger.setLevel(level)
