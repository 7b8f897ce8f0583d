"""
Pydantic models for user accounts.

``UserRecord`` mirrors a row of the ``users`` table including the
password hash and is never returned by the API; ``UserRead`` is the
public view.
"""

from typing import Optional

from pydantic import BaseModel, Field

LOGIN_PATTERN = r"^[a-zA-Z0-9!$&*+=?^_`{|}~.@-]+$"


class UserBase(BaseModel):
    login: str = Field(..., min_length=1, max_length=50, pattern=LOGIN_PATTERN, examples=["anna"])
    email: Optional[str] = Field(None, pattern=r"^[^@\s]+@[^@\s]+$", max_length=254)
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)


class UserCreate(UserBase):
    """Registration payload."""

    password: str = Field(..., min_length=4, max_length=100)


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int
    activated: bool = True
    role_id: int

    model_config = {
        "from_attributes": True,
    }


class UserRecord(UserRead):
    """Full ``users`` row as stored, password hash included."""

    id: Optional[int] = None
    password: str

    def to_read(self) -> UserRead:
        return UserRead.model_validate(self.model_dump(exclude={"password"}))


class LoginRequest(BaseModel):
    login: str
    password: str


class TokenResponse(BaseModel):
    id_token: str
