"""Repository for the ``pets`` table."""

from furrymatch_api.app.repositories.base import BaseRepository
from furrymatch_api.app.schemas.pet import PetRead


class PetRepository(BaseRepository[PetRead]):
    table = "pets"
    model = PetRead
    columns = ("name", "pet_type", "gender", "breed", "age", "description", "owner_id")
    sortable = frozenset({"id", "name", "pet_type", "breed", "age"})
