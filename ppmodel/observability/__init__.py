"""
Observability utilities.

All layers import logging helpers from here.
"""

from .logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
