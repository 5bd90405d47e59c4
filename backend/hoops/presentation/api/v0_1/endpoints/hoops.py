"""Hoop submission endpoint."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile

from hoops.application.schemas import HoopRecordSchema
from hoops.application.services import HoopSubmissionService
from hoops.domain.entities import PendingUpload
from hoops.domain.exceptions import IdentityGenerationError
from hoops.infrastructure.dependencies import get_hoop_submission_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hoops", tags=["Hoops"])

MULTIPART_REQUIRED = "Request must be encoded as multipart/form-data"
SAVE_FAILED = "Error saving hoop"
CREATE_FAILED = "Error creating hoop"
IMAGE_FIELD = "image"


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


@router.post(
    "/",
    response_model=HoopRecordSchema,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": MULTIPART_REQUIRED},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": SAVE_FAILED},
    },
)
async def create_hoop(
    request: Request,
    service: HoopSubmissionService = Depends(get_hoop_submission_service),
):
    """Accept a hoop as multipart form data, save it, and echo the stored record."""
    if _media_type(request.headers.get("content-type", "")) != "multipart/form-data":
        return PlainTextResponse(MULTIPART_REQUIRED, status_code=status.HTTP_400_BAD_REQUEST)

    form = await request.form()
    try:
        fields: dict[str, str] = {}
        upload: PendingUpload | None = None
        for name, value in form.multi_items():
            if isinstance(value, str):
                fields.setdefault(name, value)
            elif name == IMAGE_FIELD and isinstance(value, UploadFile) and upload is None:
                upload = PendingUpload(
                    content=await value.read(),
                    content_type=value.content_type or "",
                )
    finally:
        await form.close()

    try:
        hoop = await service.submit(fields, upload)
    except IdentityGenerationError:
        logger.exception("Could not create hoop")
        return PlainTextResponse(CREATE_FAILED, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception:
        logger.exception("Could not save hoop")
        return PlainTextResponse(SAVE_FAILED, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HoopRecordSchema.from_domain(hoop.attributes)
