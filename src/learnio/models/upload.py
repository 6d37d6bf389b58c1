"""Upload data models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

UPLOAD_SUCCESS_MESSAGE = "File uploaded successfully"
NO_FILE_MESSAGE = "No file uploaded"


@dataclass(frozen=True)
class UploadSuccess:
    """A file that was fully written to the blob store."""

    storage_name: str
    public_path: str
    size_bytes: int


@dataclass(frozen=True)
class UploadFailure:
    """An upload rejected before anything was stored."""

    reason: str


class UploadResponse(BaseModel):
    """Response model for a successful upload."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = UPLOAD_SUCCESS_MESSAGE
    filename: str
    file_path: str = Field(..., alias="filePath")


class ErrorResponse(BaseModel):
    """Response model for any failed request."""

    message: str
