# Standard library imports
import logging
import sys

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"


def configure_logging() -> None:
    """
    Configure root logging for the service.

    Level comes from LOG_LEVEL. Chatty client libraries are held at WARNING
    so request logs stay readable.
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)
    for noisy in ("httpcore", "httpx", "hpack", "pymongo"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
