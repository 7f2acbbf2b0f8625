"""Logging configuration for the command line tools."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the tools; level is a logging level name."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=numeric,
        force=True,
    )

    # Keep uvicorn's per-request lines out of INFO output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
