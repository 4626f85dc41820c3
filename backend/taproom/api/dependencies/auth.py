"""
Authentication Dependencies

FastAPI dependencies that resolve the caller's Principal.

Dependency Hierarchy:
=====================
    bearer (HTTPBearer, optional)   ← Extract token from Authorization header
           │
           ▼
    get_current_principal()         ← Principal, anonymous if no token

Every catalog endpoint takes CurrentPrincipal and passes it to the service
explicitly. Reads ignore it; writes hand it to the ownership guard, which
answers 401 for anonymous callers and 403 for the wrong owner.

Type Aliases:
=============
    CurrentPrincipal  - Principal for this request (may be anonymous)
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taproom.api.dependencies.database import DbSession
from taproom.shared.core.logging import clear_log_context, log_context
from taproom.shared.repositories.user_repository import UserRepository
from taproom.shared.security.principal import Principal, PrincipalResolver, TokenSecurityContext


# Security scheme for Bearer tokens. A missing header is not an error here.
bearer = HTTPBearer(auto_error=False)


def get_principal_resolver(
    db: DbSession,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer)] = None,
) -> PrincipalResolver:
    token = credentials.credentials if credentials else None
    return PrincipalResolver(TokenSecurityContext(token, UserRepository(db)))


async def get_current_principal(
    resolver: Annotated[PrincipalResolver, Depends(get_principal_resolver)],
) -> Principal:
    """
    Resolve the caller.

    Raises:
        AuthenticationError: token present but invalid, expired, or for a
            disabled account
    """
    principal = await resolver.resolve()
    clear_log_context()
    log_context(principal=principal.username or "anonymous", scope_id=principal.scope_id)
    return principal


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
