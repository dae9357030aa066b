"""
Logging configuration for the application.
"""
import copy
import logging
import sys
from config import Config


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name on terminal output."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format a copy of the record so other handlers see the plain level name."""
        if not self.use_color:
            return super().format(record)
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a logger writing to stdout.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    # Serverless log collectors don't render ANSI escapes
    formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_color=sys.stdout.isatty()
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger


app_logger = setup_logger("metrik_intake", getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO))
