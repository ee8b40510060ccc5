"""
Pydantic models for request handling.
"""

from .requests import RequestContext, RequestParams
from .responses import HandlerResult
from .tables import MimeEntry, MimeTable, ServerConfig

__all__ = [
    # Request models
    "RequestContext",
    "RequestParams",
    # Response models
    "HandlerResult",
    # Tables
    "MimeEntry",
    "MimeTable",
    "ServerConfig",
]
