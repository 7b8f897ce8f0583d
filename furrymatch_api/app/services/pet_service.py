"""Service layer for pets."""

from furrymatch_api.app.schemas.pet import PetRead
from furrymatch_api.app.services.entity_service import EntityService


class PetService(EntityService[PetRead]):
    entity_name = "pet"
