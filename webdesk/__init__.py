"""
Webdesk

A local development file server that reads, writes and lists files under
a root directory, with a native window shell that opens the served app.
"""

__version__ = "0.1.0"

from .main import create_app  # noqa: E402
from .server import init  # noqa: E402

__all__ = ["create_app", "init"]
