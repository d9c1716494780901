"""Logging setup for the service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again (tests, repeated ``create_app``) is a no-op.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"). Case insensitive.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
