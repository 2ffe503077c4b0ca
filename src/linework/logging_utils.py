"""
logging_utils.py

Console + file logging for scripts that use linework. The library itself
only emits records on the "linework" logger and never configures handlers.
"""

__all__ = ["configure_logging", "ColorFormatter", "parse_level"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

PathLike = Union[str, os.PathLike]
MAX_LOG_BYTES = 5_000_000
LOG_BACKUPS = 5


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{color}{record.levelname:<5s}{Style.RESET_ALL}] "
            f"{record.name}: {record.getMessage()}"
        )


def parse_level(level: Union[int, str]) -> int:
    """Accept a logging level as int or name ("debug", "INFO", ...)."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO,
                      log_dir: Optional[PathLike] = "logs",
                      name: str = "linework",
                      run_prefix: str = "run") -> Optional[Path]:
    """Configure colorized console logging plus a rotating log file.

    Calling it again replaces the handlers installed by the previous call.
    With `log_dir=None` only the console handler is installed.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    just_fix_windows_console()
    datefmt = "%H:%M:%S"

    logger = logging.getLogger(name)
    logger.setLevel(parse_level(level))
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y-%m-%d_%H%M%S")
    log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

    fh = RotatingFileHandler(log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)
    fh.setFormatter(logging.Formatter(
        "[%(asctime)s] [%(process)5d] [%(levelname)-5s] %(name)s: %(message)s", datefmt))
    logger.addHandler(fh)

    logger.debug(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
