"""
Authentication Handler

Handles login and "who am I" endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer, not here. Errors raised by
services are CatalogExceptions and are rendered by the global handlers.
"""

from fastapi import APIRouter, Depends

from taproom.api.dependencies.auth import CurrentPrincipal
from taproom.api.dependencies.services import get_auth_service
from taproom.shared.schemas.auth import LoginRequest, PrincipalResponse, TokenResponse
from taproom.shared.services.auth_service import AuthService


router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and return JWT token.

    Raises:
        401: If credentials are invalid or the account is disabled
    """
    access_token, expires_in = await auth_service.login(
        username=credentials.username,
        password=credentials.password,
    )
    return TokenResponse(access_token=access_token, expires_in=expires_in)


@router.get("/me", response_model=PrincipalResponse)
async def current_principal(principal: CurrentPrincipal):
    """Return the caller; anonymous callers get an anonymous principal."""
    return PrincipalResponse(
        user_id=principal.user_id,
        username=principal.username,
        roles=sorted(role.value for role in principal.roles),
        scope_id=principal.scope_id,
        anonymous=principal.is_anonymous,
    )
