"""Centralized logging configuration."""
import logging
import sys

# Transport libraries that log every request at INFO.
CHATTY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the client and its command line.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if level.upper() != "DEBUG":
        for name in CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
