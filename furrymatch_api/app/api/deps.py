"""
FastAPI dependency providers.

Repositories are stateless (each call opens its own connection), so
the providers simply build a fresh service graph per request.  Tests
can swap any of them through ``app.dependency_overrides``.
"""

from typing import List, Optional

from fastapi import Query

from furrymatch_api.app.core.config import settings
from furrymatch_api.app.repositories.base import PageRequest
from furrymatch_api.app.repositories.owner_repository import OwnerRepository
from furrymatch_api.app.repositories.pet_repository import PetRepository
from furrymatch_api.app.repositories.photo_repository import PhotoRepository
from furrymatch_api.app.repositories.user_repository import UserRepository
from furrymatch_api.app.services.owner_service import OwnerService
from furrymatch_api.app.services.pet_service import PetService
from furrymatch_api.app.services.photo_service import PhotoService
from furrymatch_api.app.services.user_service import UserService


def get_user_service() -> UserService:
    return UserService(UserRepository())


def get_owner_service() -> OwnerService:
    return OwnerService(OwnerRepository(), get_user_service())


def get_pet_service() -> PetService:
    return PetService(PetRepository())


def get_photo_service() -> PhotoService:
    return PhotoService(PhotoRepository())


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: Optional[int] = Query(None, ge=1, description="Page size"),
    sort: Optional[List[str]] = Query(None, description="Sort order, e.g. ``name,desc``; repeatable"),
) -> PageRequest:
    """Build a ``PageRequest`` from ``page``, ``size`` and ``sort`` query parameters.

    ``size`` defaults to ``settings.default_page_size`` and is capped at
    ``settings.max_page_size``.
    """
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, size=page_size, sort=PageRequest.parse_sort(sort))
