"""
Pydantic Schemas
================
Request and response models for the API.
"""
from .count import CountRequest, CountResponse, CountSummary, FileEntry, ReadError

__all__ = ["CountRequest", "CountResponse", "CountSummary", "FileEntry", "ReadError"]
