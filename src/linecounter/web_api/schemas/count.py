"""
Count Schemas
=============
Request and response models for the count endpoint.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CountRequest(BaseModel):
    """Request to count lines under a directory"""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "directory": "/path/to/src/main/kotlin",
                "file": "Main",
                "extension": ".kt",
            }
        }
    )

    directory: str = Field(..., description="Local directory to scan")
    file: Optional[str] = Field(default=None, description="Single file name without extension")
    extension: Optional[str] = Field(default=None, description="File extension, e.g. '.kt'")


class FileEntry(BaseModel):
    file_name: str
    path: str
    line_count: int = Field(..., ge=0)


class ReadError(BaseModel):
    path: str
    reason: str


class CountSummary(BaseModel):
    files_counted: int = Field(default=0)
    total_lines: int = Field(default=0)
    files_failed: int = Field(default=0)


class CountResponse(BaseModel):
    """Response from a count operation"""

    status: str = Field(..., description="Count status: complete")
    schema_version: str
    root: str
    extension: str
    files: List[FileEntry] = Field(default_factory=list)
    errors: List[ReadError] = Field(default_factory=list)
    summary: CountSummary
