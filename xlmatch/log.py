# xlmatch/log.py

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Send xlmatch and GUI records to stderr; safe to call more than once."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("xlmatch").setLevel(level)
