"""
Owner endpoints for API v1.

CRUD resource for owner profiles.  Every route requires an
authenticated user.  Deleting an owner also deletes the account of the
user making the request (see ``OwnerService.delete_with_account``).
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from furrymatch_api.app.api.deps import get_owner_service, get_page_request
from furrymatch_api.app.core.config import settings
from furrymatch_api.app.core.errors import BadRequestAlertError, ConflictAlertError, NotFoundAlertError
from furrymatch_api.app.core.http_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_update_alert,
    generate_pagination_headers,
    wrap_or_not_found,
)
from furrymatch_api.app.core.security import get_current_user
from furrymatch_api.app.repositories.base import PageRequest
from furrymatch_api.app.schemas.owner import OwnerPatch, OwnerRead, OwnerWrite
from furrymatch_api.app.services.owner_service import OwnerService

logger = logging.getLogger(__name__)

ENTITY_NAME = "owner"

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("", response_model=OwnerRead, status_code=status.HTTP_201_CREATED)
async def create_owner(
    owner: OwnerWrite,
    request: Request,
    response: Response,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerRead:
    """Create a new owner.

    Answers 400 with error key ``idexists`` if the body already carries
    an id.  On success the ``Location`` header points at the new owner.
    """
    logger.debug("REST request to save Owner : %s", owner)
    if owner.id is not None:
        raise ConflictAlertError("A new owner cannot already have an ID", ENTITY_NAME)
    result = await service.save(owner)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{result.id}"
    response.headers.update(create_entity_creation_alert(settings.client_app_name, ENTITY_NAME, str(result.id)))
    return result


@router.put("/{owner_id}", response_model=OwnerRead)
async def update_owner(
    owner_id: int,
    owner: OwnerWrite,
    response: Response,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerRead:
    """Replace an existing owner.

    The id in the path always wins over the one in the body.  Answers
    400 (``idnull``, ``idinvalid`` or ``idnotfound``) when the target
    cannot be updated.
    """
    owner.id = owner_id
    logger.debug("REST request to update Owner : %s, %s", owner_id, owner)
    if owner.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if owner.id != owner_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(owner_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = await service.update(owner)
    if result is None:
        raise NotFoundAlertError(ENTITY_NAME)
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(owner_id)))
    return result


@router.patch("/{owner_id}", response_model=OwnerRead)
async def partial_update_owner(
    owner_id: int,
    response: Response,
    owner: OwnerPatch = Body(..., media_type="application/merge-patch+json"),
    service: OwnerService = Depends(get_owner_service),
) -> OwnerRead:
    """Update the given fields of an existing owner; null fields are ignored."""
    logger.debug("REST request to partial update Owner partially : %s, %s", owner_id, owner)
    if owner.id is None:
        raise BadRequestAlertError("Invalid id", ENTITY_NAME, "idnull")
    if owner.id != owner_id:
        raise BadRequestAlertError("Invalid ID", ENTITY_NAME, "idinvalid")
    if not await service.exists(owner_id):
        raise BadRequestAlertError("Entity not found", ENTITY_NAME, "idnotfound")

    result = wrap_or_not_found(await service.partial_update(owner))
    response.headers.update(create_entity_update_alert(settings.client_app_name, ENTITY_NAME, str(owner_id)))
    return result


@router.get("", response_model=List[OwnerRead])
async def list_owners(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    service: OwnerService = Depends(get_owner_service),
) -> List[OwnerRead]:
    """Return a page of owners.

    - **page**, **size**: zero-based page index and page size.
    - **sort**: ``field[,asc|desc]``, repeatable.  Sortable fields:
      `id`, `first_name`, `last_name`, `email`, `city`.

    Total count and navigation links are returned in the
    ``X-Total-Count`` and ``Link`` headers.
    """
    logger.debug("REST request to get a page of Owners")
    page = await service.find_all(page_request)
    response.headers.update(generate_pagination_headers(request.url, page))
    return page.content


@router.get("/{owner_id}", response_model=OwnerRead)
async def get_owner(
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
) -> OwnerRead:
    logger.debug("REST request to get Owner : %s", owner_id)
    return wrap_or_not_found(await service.find_one(owner_id))


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_owner(
    owner_id: int,
    response: Response,
    current_user: dict = Depends(get_current_user),
    service: OwnerService = Depends(get_owner_service),
) -> None:
    """Delete an owner together with the requesting user's account.

    The response carries the ``userManagement.deleted`` alert with the
    login of the removed account.  The caller's token is no longer
    valid afterwards.  An ``owner_id`` that matches no owner still
    removes the caller's account and answers 204.

    The primary administrator is refused with 400 ``primaryadmin`` and
    nothing is deleted.
    """
    logger.debug("REST request to delete Owner : %s", owner_id)
    login = current_user["login"]
    try:
        await service.delete_with_account(owner_id, login)
    except ValueError as e:
        raise BadRequestAlertError(
            "Cannot delete the primary administrator", "userManagement", str(e)
        ) from e
    response.headers.update(create_alert(settings.client_app_name, "userManagement.deleted", login))
    return None
