"""Repository for the ``photos`` table."""

from furrymatch_api.app.repositories.base import BaseRepository
from furrymatch_api.app.schemas.photo import PhotoRead


class PhotoRepository(BaseRepository[PhotoRead]):
    table = "photos"
    model = PhotoRead
    columns = ("photo", "photo_content_type", "caption", "pet_id")
    sortable = frozenset({"id", "caption", "pet_id"})
