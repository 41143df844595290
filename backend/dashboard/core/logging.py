import logging
import sys

PACKAGE_LOGGER = "dashboard"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling it again only updates the level; handlers are not duplicated.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    return logger
