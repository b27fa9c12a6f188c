"""User and session schemas - API contract and validation."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from inventory_tracker.core.policy import Role


class SignUpRequest(BaseModel):
    email: EmailStr
    # bcrypt accepts max 72 bytes; longer passwords cause 500. Validate here for a clear 400.
    password: str = Field(..., min_length=1, max_length=72)
    name: str | None = Field(default=None, max_length=255)
    role: str | None = None  # anything other than "ADMIN" becomes USER


class SignInRequest(BaseModel):
    email: str
    password: str = Field(..., max_length=72)


class Identity(BaseModel):
    """The actor for one request. Role always comes from storage, never from the token."""

    id: str
    email: str
    name: str | None = None
    role: Role

    model_config = ConfigDict(from_attributes=True)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Identity
