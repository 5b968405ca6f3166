import logging

from colorlog import ColoredFormatter

LOG_FORMAT = "%(log_color)s[%(levelname)s] %(message)s"
LOG_COLORS = {
    "DEBUG": "white",
    "INFO": "cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers)


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger; repeated calls only change the level."""
    logger = logging.getLogger("reqlayer")
    logger.setLevel(level)
    logger.propagate = False

    if not _has_console_handler(logger):
        console = logging.StreamHandler()
        console.setFormatter(ColoredFormatter(LOG_FORMAT, log_colors=LOG_COLORS))
        logger.addHandler(console)
    return logger
