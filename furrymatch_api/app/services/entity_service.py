"""
Shared CRUD logic for entity services.

``EntityService`` implements the operations every entity resource
needs: save, full update, merge-patch, paginated listing, lookup and
deletion.  Identifier policy (pre-set ids, id/path mismatches) is the
resource layer's job; by the time a call reaches this class the
request has been validated.
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from furrymatch_api.app.repositories.base import BaseRepository, Page, PageRequest

T = TypeVar("T", bound=BaseModel)


class EntityService(Generic[T]):
    """CRUD operations over one repository."""

    entity_name = "entity"

    def __init__(self, repository: BaseRepository[T]) -> None:
        self.repository = repository
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    async def save(self, entity: BaseModel) -> T:
        """Persist a new entity and return it with its assigned id."""
        self.logger.debug("Request to save %s : %s", self.entity_name, entity)
        result = self.repository.save(entity)
        self.logger.info("Created %s %s", self.entity_name, result.id)
        return result

    async def update(self, entity: BaseModel) -> Optional[T]:
        """Replace every field of the stored entity with ``entity``.

        Returns ``None`` if the row no longer exists.
        """
        self.logger.debug("Request to update %s : %s", self.entity_name, entity)
        result = self.repository.save(entity)
        if result is not None:
            self.logger.info("Updated %s %s", self.entity_name, result.id)
        return result

    async def partial_update(self, patch: BaseModel) -> Optional[T]:
        """Merge the non-null fields of ``patch`` into the stored entity.

        Fields that are null or absent on ``patch`` keep their stored
        value.  Returns ``None`` when the target row does not exist,
        including when it disappears between the read and the write.
        """
        self.logger.debug("Request to partially update %s : %s", self.entity_name, patch)
        existing = self.repository.find_by_id(patch.id)
        if existing is None:
            return None
        changes = patch.model_dump(exclude_none=True, exclude={"id"})
        merged = existing.model_copy(update=changes)
        result = self.repository.save(merged)
        if result is not None:
            self.logger.info("Partially updated %s %s (%s)", self.entity_name, result.id, ", ".join(sorted(changes)))
        return result

    async def find_all(self, page_request: PageRequest) -> Page[T]:
        self.logger.debug("Request to get all %ss", self.entity_name)
        return self.repository.find_all(page_request)

    async def find_one(self, entity_id: int) -> Optional[T]:
        self.logger.debug("Request to get %s : %s", self.entity_name, entity_id)
        return self.repository.find_by_id(entity_id)

    async def exists(self, entity_id: int) -> bool:
        return self.repository.exists_by_id(entity_id)

    async def delete(self, entity_id: int) -> bool:
        """Delete by id.  Deleting an unknown id is a no-op returning ``False``."""
        self.logger.debug("Request to delete %s : %s", self.entity_name, entity_id)
        deleted = self.repository.delete_by_id(entity_id)
        if deleted:
            self.logger.info("Deleted %s %s", self.entity_name, entity_id)
        return deleted
