"""
Auth Schemas

Request/response models for authentication endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from taproom.shared.schemas.common import BaseSchema


class LoginRequest(BaseModel):
    """Schema for login."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Schema for login response. Field names follow the OAuth2 token response."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int  # seconds


class PrincipalResponse(BaseSchema):
    """The caller as seen by the API."""

    user_id: Optional[int] = None
    username: Optional[str] = None
    roles: list[str]
    scope_id: Optional[int] = None
    anonymous: bool
