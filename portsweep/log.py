import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Routes the package logger to stderr through Rich.
    stdout is reserved for progress markers and the report.
    """
    logger = logging.getLogger("portsweep")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
