"""Logging utilities for docpipe."""

from docpipe.logging.config import JsonFormatter, setup_logging

__all__ = ["JsonFormatter", "setup_logging"]
