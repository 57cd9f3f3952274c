import logging
from typing import TextIO

ROOT_LOGGER_NAME = "deepcli"
LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(verbose: bool, stream: TextIO) -> logging.Logger:
    """
    Route the `deepcli` logger tree to `stream` (normally stderr).
    Verbose mode shows progress messages; otherwise only warnings get through.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    if verbose:
        logger.debug("Verbose mode enabled")
    return logger
