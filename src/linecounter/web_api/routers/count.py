"""
Count Router
============
Endpoint for counting non-blank lines under a directory.
"""
from fastapi import APIRouter, HTTPException

from linecounter import api as core_api
from linecounter.errors import (
    DirectoryNotFoundError,
    LineCounterError,
    SourceFileNotFoundError,
)
from linecounter.web_api.schemas.count import CountRequest, CountResponse

router = APIRouter()


@router.post("/", response_model=CountResponse)
def count_lines(request: CountRequest):
    """
    Count non-blank lines.

    - **directory**: Local directory to scan
    - **file**: Optional single file name, without extension
    - **extension**: Optional extension (default from server config)
    """
    try:
        result = core_api.count_lines(
            request.directory,
            file=request.file,
            extension=request.extension,
        )
    except (DirectoryNotFoundError, SourceFileNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (LineCounterError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CountResponse(status="complete", **result)
