"""
Pydantic models for pet photos.

The image itself travels inside the JSON body as base64 text together
with its MIME type, the same way the generated frontend uploads it.
"""

import base64
import binascii
from typing import Optional

from pydantic import BaseModel, Field, field_validator

CONTENT_TYPE_PATTERN = r"^image/[a-z0-9.+-]+$"


def _check_base64(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("photo must be base64 encoded")
    return value


class PhotoBase(BaseModel):
    photo: str = Field(..., min_length=1, description="Base64 encoded image data")
    photo_content_type: str = Field(..., pattern=CONTENT_TYPE_PATTERN, examples=["image/png"])
    caption: Optional[str] = Field(None, max_length=255)
    pet_id: Optional[int] = None

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, v):
        return _check_base64(v)


class PhotoWrite(PhotoBase):
    """Request body for creating or replacing a photo."""

    id: Optional[int] = None


class PhotoRead(PhotoBase):
    """Schema for reading a photo from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class PhotoPatch(BaseModel):
    """Merge-patch body; omitted or null fields are left untouched."""

    id: Optional[int] = None
    photo: Optional[str] = Field(None, min_length=1)
    photo_content_type: Optional[str] = Field(None, pattern=CONTENT_TYPE_PATTERN)
    caption: Optional[str] = Field(None, max_length=255)
    pet_id: Optional[int] = None

    @field_validator("photo")
    @classmethod
    def validate_photo(cls, v):
        return _check_base64(v)
