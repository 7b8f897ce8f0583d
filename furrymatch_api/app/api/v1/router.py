"""
Top-level router for version 1 of the API.

Aggregates the entity resources and account routes.  When a new
entity is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import account, owners, pets, photos, users

router = APIRouter()

router.include_router(account.router, tags=["account"])
router.include_router(users.router, prefix="/admin/users", tags=["users"])
router.include_router(owners.router, prefix="/owners", tags=["owners"])
router.include_router(pets.router, prefix="/pets", tags=["pets"])
router.include_router(photos.router, prefix="/photos", tags=["photos"])
