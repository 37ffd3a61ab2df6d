"""Logging configuration for the CLI.

Library modules only call `logging.getLogger(__name__)`; entrypoints call
`setup_logging()` once to attach handlers to the root logger.

Format:
    2026-10-18T13:45:12.345Z | INFO     | slm_grating.pipeline.compositor | Composed 3 layers
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional


class GratingFormatter(logging.Formatter):
    """Human-readable formatter with UTC timestamps and optional colors."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True, stream=None):
        super().__init__()
        stream = stream if stream is not None else sys.stderr
        self.use_color = use_color and hasattr(stream, 'isatty') and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'

        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        line = ' | '.join([ts_str, level, record.name, record.getMessage()])

        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    *,
    color: bool = True,
    quiet_libs: Optional[List[str]] = None
) -> List[logging.Handler]:
    """Configure the root logger (idempotent).

    Args:
        log_level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
        log_file: Optional log file path, parent directories are created
        color: Use ANSI colors on a terminal
        quiet_libs: Library loggers to raise to WARNING, defaults to ["PIL"]

    Returns:
        Installed handlers
    """
    root = logging.getLogger()

    # Repeated calls replace the handlers installed earlier
    for handler in list(root.handlers):
        if getattr(handler, '_slm_grating', False):
            root.removeHandler(handler)
            handler.close()

    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    root.setLevel(level)

    handlers: List[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(GratingFormatter(use_color=color, stream=sys.stderr))
    handlers.append(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(GratingFormatter(use_color=False))
        handlers.append(file_handler)

    for handler in handlers:
        handler._slm_grating = True
        root.addHandler(handler)

    for lib in (quiet_libs if quiet_libs is not None else ["PIL"]):
        logging.getLogger(lib).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    return handlers
