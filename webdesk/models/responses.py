"""
Response models for the Webdesk file server.
"""

from pydantic import BaseModel, Field
from starlette.responses import Response


class HandlerResult(BaseModel):
    """Outcome of a file handler."""

    status_code: int = Field(..., description="HTTP status code")
    body: str | bytes = Field("", description="Text or binary payload")
    content_type: str = Field("text/plain", description="Content type of the payload")

    def to_response(self) -> Response:
        """Build the HTTP response."""
        return Response(content=self.body, status_code=self.status_code, media_type=self.content_type)
