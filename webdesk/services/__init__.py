"""
Service layer for file operations.
"""

from .file_service import FileService
from .resolver import escape_path, load_config, load_mime_table, resolve_local_path

__all__ = ["FileService", "escape_path", "load_config", "load_mime_table", "resolve_local_path"]
