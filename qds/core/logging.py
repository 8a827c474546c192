"""
Logging setup
Application logs go to stdout, where gunicorn and uvicorn collect them
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(level: str = "INFO") -> logging.Handler:
    """Attach one stdout handler to the root logger and set its level"""
    global _handler
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
    return _handler
