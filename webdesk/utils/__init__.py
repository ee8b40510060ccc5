"""
Utility functions and classes.
"""

from .exceptions import setup_exception_handlers
from .logging import setup_logging

__all__ = ["setup_logging", "setup_exception_handlers"]
