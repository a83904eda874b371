"""Grocery image analysis endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from grocery_organizer.domain.analysis import ImageUpload

if TYPE_CHECKING:
    from grocery_organizer.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["grocery"])

INVALID_UPLOAD_MESSAGE = "Please upload a valid image file."
UNKNOWN_MODE_MESSAGE = "Unknown analysis mode."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


@router.post("/grocery")
async def analyze_grocery_image(request: Request) -> JSONResponse:
    """Send an uploaded grocery list photo to the model and return its text."""
    container: AppContainer = request.app.state.container
    service = container.analysis_service
    mode = request.query_params.get("mode")
    if mode is not None and not service.has_mode(mode):
        return _error(UNKNOWN_MODE_MESSAGE, status.HTTP_400_BAD_REQUEST)

    try:
        content_type = request.headers.get("content-type")
        if not content_type or not content_type.startswith("multipart/form-data"):
            return _error(INVALID_UPLOAD_MESSAGE, status.HTTP_400_BAD_REQUEST)

        async with request.form() as form:
            upload = form.get("file")
            if not isinstance(upload, UploadFile) or not _is_image(upload):
                return _error(INVALID_UPLOAD_MESSAGE, status.HTTP_400_BAD_REQUEST)
            image = ImageUpload(
                content=await upload.read(),
                media_type=upload.content_type or "",
            )

        result = await service.analyze(image, mode=mode)
    except Exception as exc:
        logger.exception("Grocery analysis failed")
        return _error(_error_message(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse({"result": result})


def _is_image(upload: UploadFile) -> bool:
    return (upload.content_type or "").startswith("image/")


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _error_message(exc: Exception) -> str:
    if isinstance(exc, HTTPException):
        return str(exc.detail) or UNKNOWN_ERROR_MESSAGE
    return str(exc) or UNKNOWN_ERROR_MESSAGE
