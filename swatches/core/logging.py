# File: swatches/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a single stream handler to the root logger.

    Safe to call more than once (e.g. create_application() in tests):
    the handler is only added the first time.
    """
    root = logging.getLogger()
    if not any(getattr(h, "_swatches", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._swatches = True
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
