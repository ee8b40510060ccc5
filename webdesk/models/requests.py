"""
Request models for the Webdesk file server.
"""

from pydantic import BaseModel, Field


class RequestParams(BaseModel):
    """Query or form parameters understood by the handlers."""

    model_config = {"extra": "allow"}

    folder: str | None = Field(None, description="Folder relative to the server root")
    search: str | None = Field(None, description="Query_Files search expression")
    code: str | None = Field(None, description="Accepted for compatibility, unused")
    data: str | None = Field(None, description="File contents, base64 for binary types")


class RequestContext(BaseModel):
    """Transient state of a single request."""

    method: str = Field(..., description="HTTP method")
    path: str = Field(..., description="Escaped request path relative to the root")
    params: RequestParams = Field(default_factory=RequestParams, description="Parsed parameters")
