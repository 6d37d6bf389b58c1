"""Upload API routes."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from learnio.core.exceptions import EntropySourceError, StorageWriteError
from learnio.models.upload import ErrorResponse, UploadFailure, UploadResponse
from learnio.services.upload import UploadService

router = APIRouter(tags=["upload"])
logger = logging.getLogger(__name__)


def get_upload_service(request: Request) -> UploadService:
    """Return the upload service built at application startup."""
    return request.app.state.upload_service


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_file(request: Request) -> UploadResponse | JSONResponse:
    """Upload a single file under the configured form field."""
    service = get_upload_service(request)
    field_name = request.app.state.upload_field_name

    async with request.form() as form:
        # Only the first file part under the field is consumed
        file = next(
            (part for part in form.getlist(field_name) if isinstance(part, UploadFile)),
            None,
        )

        try:
            result = await service.handle(file)
        except StorageWriteError as e:
            logger.error(f"Failed to store file: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Failed to store file")
        except EntropySourceError as e:
            logger.error(f"Failed to generate storage name: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")
        except Exception as e:
            logger.error(f"Unexpected error during upload: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail="Internal server error")

    if isinstance(result, UploadFailure):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(message=result.reason).model_dump(),
        )

    return UploadResponse(filename=result.storage_name, file_path=result.public_path)
