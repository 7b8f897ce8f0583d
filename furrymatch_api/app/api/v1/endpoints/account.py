"""
Account endpoints for API v1.

Registration, token issuance and the current user's profile.
Registration and authentication are open; ``/account`` needs a token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from furrymatch_api.app.api.deps import get_user_service
from furrymatch_api.app.core.errors import BadRequestAlertError
from furrymatch_api.app.core.security import create_access_token, get_current_user
from furrymatch_api.app.schemas.user import LoginRequest, TokenResponse, UserCreate, UserRead
from furrymatch_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

_REGISTRATION_ERRORS = {
    "loginexists": "Login name already used!",
    "emailexists": "Email is already in use!",
}


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_account(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a new account.

    The very first account becomes an administrator.  Answers 400 with
    ``loginexists`` or ``emailexists`` on duplicates.
    """
    logger.debug("REST request to register user : %s", user.login)
    try:
        return await service.register_user(user)
    except ValueError as e:
        error_key = str(e)
        raise BadRequestAlertError(_REGISTRATION_ERRORS.get(error_key, error_key), "userManagement", error_key) from e


@router.post("/authenticate", response_model=TokenResponse)
async def authenticate(
    credentials: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange login and password for a bearer token.

    The token is returned in the body and in the ``Authorization``
    header.
    """
    user = await service.authenticate(credentials.login, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token({"sub": user.login})
    response.headers["Authorization"] = f"Bearer {token}"
    return TokenResponse(id_token=token)


@router.get("/account", response_model=UserRead)
async def get_account(
    current_user: dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    user = await service.get_user_by_login(current_user["login"])
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User could not be found")
    return user
