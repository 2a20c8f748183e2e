import logging
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from ..schemas.uploads import UploadOut
from ..file_storage import file_storage, enforce_upload_limit
from ..errors import ApiError, BadRequest, InternalError
from typing import Optional

logger = logging.getLogger(__name__)

IMAGE_REQUIRED = '이미지가 필요합니다'


class UploadRoute(APIRoute):
    """An ``image`` field that is not a file counts as no image at all."""

    def get_route_handler(self):
        handler = super().get_route_handler()

        async def route_handler(request: Request):
            try:
                return await handler(request)
            except RequestValidationError:
                raise BadRequest(IMAGE_REQUIRED)

        return route_handler


router = APIRouter(route_class=UploadRoute)

@router.post('', response_model=UploadOut, status_code=201, dependencies=[Depends(enforce_upload_limit)])
async def upload_image(image: Optional[UploadFile] = File(None)):
    """Store one memorial image and hand back its public path."""
    if image is None or not image.filename:
        raise BadRequest(IMAGE_REQUIRED)
    try:
        image_url = await file_storage.save_image(image)
    except ApiError:
        raise
    except Exception:
        logger.exception({'msg': 'upload_failed', 'filename': image.filename})
        raise InternalError('업로드 실패')
    return {'image_url': image_url}
