"""Service layer for pet photos."""

from furrymatch_api.app.schemas.photo import PhotoRead
from furrymatch_api.app.services.entity_service import EntityService


class PhotoService(EntityService[PhotoRead]):
    entity_name = "photo"
