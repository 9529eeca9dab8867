"""Utility functions for medication tracker."""

from .clock import FixedClock, SystemClock, make_clock
from .error_handler import format_error_for_user, log_operation
from .logger import logger, setup_logger

__all__ = [
    # Clock utilities
    "FixedClock",
    "SystemClock",
    "make_clock",
    # Logger utilities
    "setup_logger",
    "logger",
    # Error handling utilities
    "format_error_for_user",
    "log_operation",
]
