"""
Service layer for owner profiles.

Besides the common CRUD operations, deleting an owner through the API
also deletes the account of the user who asked for it: an owner
removing their profile leaves the platform.  That orchestration lives
in ``delete_with_account`` so the resource stays a thin adapter.
"""

from __future__ import annotations

from furrymatch_api.app.repositories.owner_repository import OwnerRepository
from furrymatch_api.app.schemas.owner import OwnerRead
from furrymatch_api.app.services.entity_service import EntityService
from furrymatch_api.app.services.user_service import UserService


class OwnerService(EntityService[OwnerRead]):
    """Owner CRUD plus the owner/account deletion coupling."""

    entity_name = "owner"

    def __init__(self, repository: OwnerRepository, user_service: UserService) -> None:
        super().__init__(repository)
        self.user_service = user_service

    async def delete_with_account(self, owner_id: int, login: str) -> bool:
        """Delete the owner, then the account identified by ``login``.

        The owner row goes first so its ``user_id`` reference never
        points at a removed account.  Returns whether the account
        existed.  The account is removed even when ``owner_id`` matches
        no owner.

        Raises ``ValueError("primaryadmin")`` without deleting anything
        when ``login`` is the primary administrator.
        """
        account = await self.user_service.get_user_by_login(login)
        if account is not None and self.user_service.is_primary_admin(account.id):
            raise ValueError("primaryadmin")
        await self.delete(owner_id)
        deleted = await self.user_service.delete_user(login)
        self.logger.info("Deleted account %s together with owner %s", login, owner_id)
        return deleted
