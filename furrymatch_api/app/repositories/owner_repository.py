"""Repository for the ``owners`` table."""

from furrymatch_api.app.repositories.base import BaseRepository
from furrymatch_api.app.schemas.owner import OwnerRead


class OwnerRepository(BaseRepository[OwnerRead]):
    table = "owners"
    model = OwnerRead
    columns = ("first_name", "last_name", "email", "phone_number", "city", "user_id")
    sortable = frozenset({"id", "first_name", "last_name", "email", "city"})
