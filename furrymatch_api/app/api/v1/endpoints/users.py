"""
User administration endpoints for API v1.

Administrators may list, inspect and delete accounts.  The primary
administrator (the first admin account) cannot be deleted.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from furrymatch_api.app.api.deps import get_page_request, get_user_service
from furrymatch_api.app.core.config import settings
from furrymatch_api.app.core.errors import BadRequestAlertError, NotFoundAlertError
from furrymatch_api.app.core.http_util import create_alert, generate_pagination_headers, wrap_or_not_found
from furrymatch_api.app.core.security import ROLE_ADMIN, require_roles
from furrymatch_api.app.repositories.base import PageRequest
from furrymatch_api.app.schemas.user import UserRead
from furrymatch_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_roles(ROLE_ADMIN))])


@router.get("", response_model=List[UserRead])
async def list_users(
    request: Request,
    response: Response,
    page_request: PageRequest = Depends(get_page_request),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    logger.debug("REST request to get all Users for an admin")
    page = await service.list_users(page_request)
    response.headers.update(generate_pagination_headers(request.url, page))
    return page.content


@router.get("/{login}", response_model=UserRead)
async def get_user(login: str, service: UserService = Depends(get_user_service)) -> UserRead:
    logger.debug("REST request to get User : %s", login)
    return wrap_or_not_found(await service.get_user_by_login(login))


@router.delete("/{login}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    login: str,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete an account by login."""
    logger.debug("REST request to delete User: %s", login)
    user = await service.get_user_by_login(login)
    if user is None:
        raise NotFoundAlertError("userManagement", "usernotfound", "User not found")
    if service.is_primary_admin(user.id):
        raise BadRequestAlertError("Cannot delete the primary administrator", "userManagement", "primaryadmin")
    await service.delete_user(login)
    response.headers.update(create_alert(settings.client_app_name, "userManagement.deleted", user.login))
    return None
