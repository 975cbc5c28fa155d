"""Centralised logging configuration."""

from __future__ import annotations

import logging
import sys
from typing import Union


def configure_logging(service_name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure root logging to stdout and return the service logger."""

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    return logging.getLogger(service_name)
