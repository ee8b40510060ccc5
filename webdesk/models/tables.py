"""
Lookup tables loaded from the server root.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field


class MimeEntry(BaseModel):
    """A MIME table record governing read/write of one file extension."""

    model_config = ConfigDict(frozen=True)

    extension: str = Field(..., description="File extension without the dot")
    content_type: str = Field(..., description="Content type sent with the file")
    is_binary: bool = Field(False, description="Whether the file is read as bytes and written from base64")


MimeTable = Mapping[str, MimeEntry]

# Values are ints when the raw text is numeric, strings otherwise.
ServerConfig = Mapping[str, int | str]
