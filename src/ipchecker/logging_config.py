import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)-8s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger on stdout; a no-op if handlers already exist."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(log_level)
    logging.getLogger("ipchecker").setLevel(log_level)
