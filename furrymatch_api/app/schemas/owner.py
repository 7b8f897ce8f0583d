"""
Pydantic models for owner profiles.

An owner is the person behind one or more pets.  The profile may be
linked to the account (``user_id``) that manages it.
"""

from typing import Optional

from pydantic import BaseModel, Field

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class OwnerBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50, examples=["Anna"])
    last_name: Optional[str] = Field(None, max_length=50, examples=["Schmidt"])
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, examples=["anna@example.com"])
    phone_number: Optional[str] = Field(None, max_length=20, examples=["+49 30 1234567"])
    city: Optional[str] = Field(None, max_length=50, examples=["Berlin"])
    user_id: Optional[int] = Field(None, description="Account that manages this profile")


class OwnerWrite(OwnerBase):
    """Request body for creating or replacing an owner.

    ``id`` must be absent on creation; on replacement it is overwritten
    by the identifier in the path.
    """

    id: Optional[int] = None


class OwnerRead(OwnerBase):
    """Schema for reading an owner from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }


class OwnerPatch(BaseModel):
    """Request body for a merge-patch.

    ``id`` is required by the resource and must match the path.  Every
    other field left out (or sent as null) keeps its stored value.
    """

    id: Optional[int] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone_number: Optional[str] = Field(None, max_length=20)
    city: Optional[str] = Field(None, max_length=50)
    user_id: Optional[int] = None
