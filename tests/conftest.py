from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from docpipe import Package


@pytest.fixture()
def core_package() -> Package:
    """Empty package named ``core`` without dependencies."""

    return Package("core")


@pytest.fixture()
def restore_docpipe_logger():
    """Restore handlers and level of the ``docpipe`` logger after a test."""

    logger = logging.getLogger("docpipe")
    handlers = list(logger.handlers)
    level = logger.level
    try:
        yield logger
    finally:
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(level)
