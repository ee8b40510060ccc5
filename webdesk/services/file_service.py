"""
File service for reading, writing and listing files under the server root.
"""

import base64
import binascii
import os
import stat
from types import MappingProxyType

from loguru import logger

from ..models.requests import RequestParams
from ..models.responses import HandlerResult
from ..models.tables import MimeEntry, MimeTable
from ..utils.exceptions import EmptyPayloadException, UnknownFileTypeException
from .resolver import escape_path, join_root, resolve_local_path
from .search import include_file, include_folder


def file_extension(file: str) -> str:
    """Extension of the last path segment, without the dot."""
    return file.split(os.sep)[-1].rsplit(".", 1)[-1]


class FileService:
    """Service for MIME-gated file access rooted at a fixed directory."""

    def __init__(self, root: str, mime_table: MimeTable):
        """
        Initialize the file service.

        Args:
            root: Absolute server root
            mime_table: Extension to MIME entry mapping, never modified
        """
        self.root = root
        self.mime_table = MappingProxyType(dict(mime_table))

    def lookup(self, file: str) -> MimeEntry:
        """
        Find the MIME entry for a file.

        Raises:
            UnknownFileTypeException: If the extension is not in the MIME table
        """
        ext = file_extension(file)
        entry = self.mime_table.get(ext)
        if entry is None:
            raise UnknownFileTypeException(ext)
        return entry

    def local_path(self, file: str) -> str:
        return resolve_local_path(self.root, file)

    def read_file(self, file: str, params: RequestParams | None = None) -> HandlerResult:
        """
        Read a file from the server root.

        Args:
            file: Escaped path relative to the root
            params: Request parameters (unused)

        Returns:
            The file content with its MIME type, or a 404 with the reason.
        """
        try:
            mime = self.lookup(file)
        except UnknownFileTypeException as e:
            return HandlerResult(status_code=404, body=f"Read Error: {e.message}")

        dest = self.local_path(file)
        try:
            if mime.is_binary:
                with open(dest, "rb") as f:
                    output = f.read()
            else:
                with open(dest, encoding="utf-8", newline="") as f:
                    output = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Read failed", file=file, error=str(e))
            return HandlerResult(status_code=404, body=f"Read Error: {e}")

        logger.debug("Read file", file=file, content_type=mime.content_type)
        return HandlerResult(status_code=200, body=output, content_type=mime.content_type)

    def write_file(self, file: str, params: RequestParams) -> HandlerResult:
        """
        Write a file under the server root.

        Text types are written as given. Binary types are sent base64
        encoded and decoded before writing.

        Args:
            file: Escaped path relative to the root
            params: Request parameters carrying `data`

        Returns:
            200 on success, 401 for unknown types or missing data, 404 on
            write failure.
        """
        try:
            mime = self.lookup(file)
        except UnknownFileTypeException as e:
            return HandlerResult(status_code=401, body=f"Write Error: {e.message}")

        if params.data is None:
            return HandlerResult(status_code=401, body=f"Write Error: Data parameter missing for {file}.")

        dest = self.local_path(file)
        try:
            if len(params.data) == 0:
                raise EmptyPayloadException(file)
            if mime.is_binary:
                payload = base64.b64decode(params.data)
                with open(dest, "wb") as f:
                    f.write(payload)
            else:
                with open(dest, "w", encoding="utf-8", newline="") as f:
                    f.write(params.data)
        except EmptyPayloadException as e:
            return HandlerResult(status_code=404, body=f"Write Error: {e.message}")
        except (OSError, binascii.Error) as e:
            logger.warning("Write failed", file=file, error=str(e))
            return HandlerResult(status_code=404, body=f"Write Error: {e}")

        logger.info("Wrote file", file=file, binary=mime.is_binary)
        return HandlerResult(status_code=200, body=f"Wrote {file}.")

    def create_folder(self, params: RequestParams) -> HandlerResult:
        """Create a folder and its parents; an existing folder is fine."""
        folder = escape_path(params.folder or "")
        try:
            os.makedirs(join_root(self.root, folder), exist_ok=True)
        except OSError as e:
            logger.warning("Folder creation failed", folder=folder, error=str(e))
            return HandlerResult(status_code=404, body=f"Folder Error: {e}")

        logger.info("Created folder", folder=folder)
        return HandlerResult(status_code=200, body=f"Created folder: {folder}")

    def query_files(self, params: RequestParams) -> HandlerResult:
        """
        List the entries of a folder that match a search expression.

        Args:
            params: Request parameters carrying `folder` and `search`

        Returns:
            Newline separated entry names, or a 404 if the folder cannot be read.
        """
        folder = escape_path(params.folder or "")
        search = params.search or ""
        if folder.endswith(os.sep):
            folder = folder[:-1]

        matched = []
        try:
            dest = self.local_path(folder)
            for name in sorted(os.listdir(dest)):
                if stat.S_ISDIR(os.lstat(os.path.join(dest, name)).st_mode):
                    if include_folder(search, name):
                        matched.append(name)
                elif include_file(search, name):
                    matched.append(name)
        except OSError as e:
            logger.warning("Query failed", folder=folder, error=str(e))
            return HandlerResult(status_code=404, body=f"Could not read files: {e}")

        logger.debug("Queried files", folder=folder, search=search, matches=len(matched))
        return HandlerResult(status_code=200, body="\n".join(matched))
