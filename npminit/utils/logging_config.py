"""Logging setup for the npminit command line."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Configure root logging once per process.

    Logs go to stderr, and additionally to ``log_file`` when one is set.
    ``verbose`` forces DEBUG regardless of the configured level.
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    resolved_level = logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.WARNING)

    logging.basicConfig(
        level=resolved_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # urllib3 is chatty at DEBUG about connection pooling
    logging.getLogger("urllib3").setLevel(max(resolved_level, logging.INFO))
