"""
Photo endpoints for API v1.

CRUD resource for photos.  Every route requires an authenticated user.
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from furrymatch_api.app.api.deps import get_photo_service, get_page_request
from furrymatch_api.app.core.config import settings
from furrymatch_api.app.core.errors import BadRequestAlertError, ConflictAlertError, NotFoundAlertError
from furrymatch_api.app.core.http_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    generate_pagination_headers,
    wrap_or_not_found,
)
from furrymatch_api.app.core.security import get_current_user
from furrymatch_api.app.repositories.base import PageRequest
from furrymatch_api.app.schemas.photo import PhotoPatch, PhotoRead, PhotoWrite
from furrymatch_api.app.services.photo_service import PhotoService

logger = logging.getLogger(__name__)

ENTITY_NAME = "photo"

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=PhotoRead, status_code=status.HTTP_201_CREATED)
async def create_photo(
    photo: PhotoWrite,
    request: Request,
    response: Response,
    service: PhotoService = Depends(get_photo_service),
) -> PhotoRead:
    """Create a new photo; 400 idexists if the body carries an id."""
    logger.debug("REST request to save Photo : %s", photo)
    if photo.id is not None:
        raise ConflictAlertError("A new photo cannot already have an ID", ENTITY_NAME)
    result = await service.save(photo)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.id}"
    response.headers.update(create_entity_creation_alert(settings.client_app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("/{photo_id}", response_model=PhotoRead)
async def update_photo(
    photo_id: int,
    photo: PhotoWrite,
    response: Response,
    service: PhotoService = Depends(get_photo_service),
) -> PhotoRead:
    photo.id = photo_id
    logger.debug("REST request to update Photo : %s, %s", photo_id, photo)
    if photo.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if photo.id != photo_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(photo_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = await service.update(photo)
    if result is None:
        raise NotFoundAlertError(ENTITY_NAME)
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(photo_id)))
    return result


@router.patch("/{photo_id}", response_model=PhotoRead)
async def partial_update_photo(
    photo_id: int,
    response: Response,
    photo: PhotoPatch = Body(..., media_type="application/merge-patch+json"),
    service: PhotoService = Depends(get_photo_service),
) -> PhotoRead:
    logger.debug("REST request to partial update Photo partially : %s, %s", photo_id, photo)
    if photo.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if photo.id != photo_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(photo_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = wrap_or_not_found(await service.partial_update(photo))
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(photo_id)))
    return result


@router.get("", response_model=List[PhotoRead])
async def list_photos(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    service: PhotoService = Depends(get_photo_service),
) -> List[PhotoRead]:
    """Return a page of photos.

    Sortable fields: `id`, `caption`, `pet_id`.
    """
    logger.debug("REST request to get a page of Photos")
    page = await service.find_all(page_request)
    response.headers.update(generate_pagination_headers(request.url, page))
    return page.content


@router.get("/{photo_id}", response_model=PhotoRead)
async def get_photo(
    photo_id: int,
    service: PhotoService = Depends(get_photo_service),
) -> PhotoRead:
    logger.debug("REST request to get Photo : %s", photo_id)
    return wrap_or_not_found(await service.find_one(photo_id))


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(
    photo_id: int,
    response: Response,
    service: PhotoService = Depends(get_photo_service),
) -> None:
    logger.debug("REST request to delete Photo : %s", photo_id)
    await service.delete(photo_id)
    response.headers.update(create_entity_deletion_alert(settings.client_app_name, ENTITY_NAME, str(photo_id)))
    return None
