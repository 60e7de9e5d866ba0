"""Utility exports."""

from .helpers import display_percent
from .logger import get_logger

__all__ = ["get_logger", "display_percent"]
