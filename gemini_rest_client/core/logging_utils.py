import logging
import collections
from datetime import datetime
from typing import Optional

from .config import LOG_LEVEL_FROM_ENV

LIBRARY_LOGGER_NAME = "GeminiRestClient"

CONSOLE_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(module)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


class MemoryLogHandler(logging.Handler):
    """
    Keeps the most recent log records in memory so a host application can
    inspect what the client did without touching the console.
    """
    def __init__(self, capacity=1000):
        super().__init__()
        self.log_buffer = collections.deque(maxlen=capacity)
        self.setFormatter(logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt=DATE_FORMAT
        ))

    def emit(self, record):
        try:
            msg = self.format(record)
            self.log_buffer.append({
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
                "formatted": msg
            })
        except Exception:
            self.handleError(record)

    def get_logs(self, limit=100):
        """Return the most recent records, oldest first."""
        return list(self.log_buffer)[-limit:]

    def clear(self):
        self.log_buffer.clear()


def setup_logging(level: Optional[str] = None, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """
    Attach a console handler to the library logger.

    Opt-in: importing the package never configures logging. ``level`` falls
    back to the LOG_LEVEL environment variable.
    """
    numeric_log_level = getattr(logging, (level or LOG_LEVEL_FROM_ENV).upper(), logging.INFO)

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(numeric_log_level)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    if handler not in library_logger.handlers:
        library_logger.addHandler(handler)

    for lib_logger_name in ["httpx", "httpcore", "hpack"]:
        logging.getLogger(lib_logger_name).setLevel(logging.WARNING)

    return library_logger
