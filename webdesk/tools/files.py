"""
File server routes.

GET requests read files, create folders, list folders or fall back to the
default document. POST requests write files from a form encoded body.
"""

import re
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from loguru import logger

from ..models.requests import RequestContext, RequestParams
from ..services.file_service import FileService
from ..services.resolver import escape_path

router = APIRouter()

FILE_PATTERN = re.compile(r"\w+\.\w+$", re.ASCII)
CREATE_FOLDER = "create-folder"
QUERY_FILES = "query-files"


def get_file_service(request: Request) -> FileService:
    """Get the file service bound to the application."""
    return request.app.state.file_service


def get_home_document(request: Request) -> str:
    """Get the document served for unmatched GET paths."""
    return request.app.state.home_document


def is_file_path(path: str) -> bool:
    """Whether a path ends in a word.word file name."""
    return FILE_PATTERN.search(path) is not None


def build_context(method: str, path: str, params: dict[str, str]) -> RequestContext:
    """Escape the path and parse the parameters of a request."""
    file = escape_path(path)
    context = RequestContext(method=method, path=file, params=RequestParams.model_validate(params))
    logger.debug("Handling request", method=method, path=file)
    return context


async def read_body(request: Request) -> str:
    """Buffer the whole request body before anything is dispatched."""
    chunks: list[bytes] = []
    async for chunk in request.stream():
        chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


@router.get("/{path:path}", operation_id="get_resource")
async def get_resource(
    path: str,
    request: Request,
    file_service: FileService = Depends(get_file_service),
    home_document: str = Depends(get_home_document),
) -> Response:
    """
    Dispatch a GET request.

    `word.word` paths read a file, `create-folder` and `query-files` run
    those actions, and anything else serves the default document.
    """
    context = build_context("GET", path, dict(request.query_params))

    if is_file_path(context.path):
        result = file_service.read_file(context.path, context.params)
    elif context.path == CREATE_FOLDER:
        result = file_service.create_folder(context.params)
    elif context.path == QUERY_FILES:
        result = file_service.query_files(context.params)
    else:
        result = file_service.read_file(home_document, context.params)

    return result.to_response()


@router.post("/{path:path}", operation_id="write_resource")
async def write_resource(
    path: str,
    request: Request,
    file_service: FileService = Depends(get_file_service),
) -> Response:
    """
    Dispatch a POST request.

    The form encoded body is buffered in full, then `word.word` paths are
    written. Any other path is rejected without touching the filesystem.
    """
    body = await read_body(request)
    context = build_context("POST", path, dict(parse_qsl(body, keep_blank_values=True)))

    if not is_file_path(context.path):
        return PlainTextResponse("You cannot write to a non file type.", status_code=401)

    return file_service.write_file(context.path, context.params).to_response()
