"""
Pydantic models for pets.

A pet belongs to at most one owner.  ``pet_type`` and ``gender`` are
closed enumerations serialised as their upper-case names.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PetType(str, Enum):
    DOG = "DOG"
    CAT = "CAT"
    OTHER = "OTHER"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class PetBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50, examples=["Rex"])
    pet_type: PetType = Field(..., examples=["DOG"])
    gender: Optional[Gender] = None
    breed: Optional[str] = Field(None, max_length=50, examples=["Beagle"])
    age: Optional[int] = Field(None, ge=0, le=100)
    description: Optional[str] = Field(None, max_length=1000)
    owner_id: Optional[int] = None


class PetWrite(PetBase):
    """Request body for creating or replacing a pet."""

    id: Optional[int] = None


class PetRead(PetBase):
    """Schema for reading a pet from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class PetPatch(BaseModel):
    """Merge-patch body; omitted or null fields are left untouched."""

    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    pet_type: Optional[PetType] = None
    gender: Optional[Gender] = None
    breed: Optional[str] = Field(None, max_length=50)
    age: Optional[int] = Field(None, ge=0, le=100)
    description: Optional[str] = Field(None, max_length=1000)
    owner_id: Optional[int] = None
