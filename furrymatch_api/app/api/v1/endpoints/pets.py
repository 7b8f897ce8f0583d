"""
Pet endpoints for API v1.

CRUD resource for pets.  Every route requires an authenticated user.
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from furrymatch_api.app.api.deps import get_pet_service, get_page_request
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
from furrymatch_api.app.schemas.pet import PetPatch, PetRead, PetWrite
from furrymatch_api.app.services.pet_service import PetService

logger = logging.getLogger(__name__)

ENTITY_NAME = "pet"

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=PetRead, status_code=status.HTTP_201_CREATED)
async def create_pet(
    pet: PetWrite,
    request: Request,
    response: Response,
    service: PetService = Depends(get_pet_service),
) -> PetRead:
    """Create a new pet; 400 idexists if the body carries an id."""
    logger.debug("REST request to save Pet : %s", pet)
    if pet.id is not None:
        raise ConflictAlertError("A new pet cannot already have an ID", ENTITY_NAME)
    result = await service.save(pet)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.id}"
    response.headers.update(create_entity_creation_alert(settings.client_app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet(
    pet_id: int,
    pet: PetWrite,
    response: Response,
    service: PetService = Depends(get_pet_service),
) -> PetRead:
    pet.id = pet_id
    logger.debug("REST request to update Pet : %s, %s", pet_id, pet)
    if pet.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if pet.id != pet_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(pet_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = await service.update(pet)
    if result is None:
        raise NotFoundAlertError(ENTITY_NAME)
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(pet_id)))
    return result


@router.patch("/{pet_id}", response_model=PetRead)
async def partial_update_pet(
    pet_id: int,
    response: Response,
    pet: PetPatch = Body(..., media_type="application/merge-patch+json"),
    service: PetService = Depends(get_pet_service),
) -> PetRead:
    logger.debug("REST request to partial update Pet partially : %s, %s", pet_id, pet)
    if pet.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if pet.id != pet_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(pet_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = wrap_or_not_found(await service.partial_update(pet))
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(pet_id)))
    return result


@router.get("", response_model=List[PetRead])
async def list_pets(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    service: PetService = Depends(get_pet_service),
) -> List[PetRead]:
    """Return a page of pets.

    Sortable fields: `id`, `name`, `pet_type`, `breed`, `age`.
    """
    logger.debug("REST request to get a page of Pets")
    page = await service.find_all(page_request)
    response.headers.update(generate_pagination_headers(request.url, page))
    return page.content


@router.get("/{pet_id}", response_model=PetRead)
async def get_pet(
    pet_id: int,
    service: PetService = Depends(get_pet_service),
) -> PetRead:
    logger.debug("REST request to get Pet : %s", pet_id)
    return wrap_or_not_found(await service.find_one(pet_id))


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(
    pet_id: int,
    response: Response,
    service: PetService = Depends(get_pet_service),
) -> None:
    logger.debug("REST request to delete Pet : %s", pet_id)
    await service.delete(pet_id)
    response.headers.update(create_entity_deletion_alert(settings.client_app_name, ENTITY_NAME, str(pet_id)))
    return None
