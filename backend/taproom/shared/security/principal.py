"""
Principal Resolution

Turns the caller's credentials into an explicit, immutable Principal that is
passed to every service operation. Nothing reads identity from ambient
(thread/task local) state.

Flow:
=====
    Authorization: Bearer <jwt>
        │
        ▼
    TokenSecurityContext.current_principal()
        │  decode JWT → user_id
        │  load enabled user + owned manufacturer id
        ▼
    PrincipalResolver.resolve()
        │
        ├── credentials present → Principal(user_id, username, roles, scope_id)
        └── no credentials      → Principal.anonymous()

Scope:
======
A manufacturer account's scope_id is the id of the manufacturer it owns.
Administrators carry scope_id=None: they are not bound to any owner.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol

from taproom.config.settings import settings
from taproom.shared.core.exceptions import AuthenticationError
from taproom.shared.core.logging import get_logger
from taproom.shared.models.enums import Role
from taproom.shared.repositories.user_repository import UserRepository
from taproom.shared.utils.security import SecurityUtils


log = get_logger("taproom.security")


@dataclass(frozen=True)
class Principal:
    """
    Identity of the caller for one request.

    Attributes:
        user_id: users.id, None when anonymous
        username: Login name, None when anonymous
        roles: Granted roles; {ANONYMOUS} when anonymous
        scope_id: Manufacturer id this principal owns, None for admins
    """

    user_id: Optional[int] = None
    username: Optional[str] = None
    roles: frozenset[Role] = field(default_factory=lambda: frozenset({Role.ANONYMOUS}))
    scope_id: Optional[int] = None

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls()

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None or Role.ANONYMOUS in self.roles

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles

    def has_any(self, roles: frozenset[Role]) -> bool:
        return bool(self.roles & roles)


class SecurityContext(Protocol):
    """Source of the current caller's identity."""

    async def current_principal(self) -> Optional[Principal]:
        """Return the authenticated principal, or None if no credentials were sent."""
        ...


class TokenSecurityContext:
    """
    SecurityContext backed by a bearer JWT and the users table.

    Raises AuthenticationError for an invalid or expired token, and for a
    token whose user no longer exists or has been disabled.
    """

    def __init__(self, token: Optional[str], users: UserRepository) -> None:
        self.token = token
        self.users = users

    async def current_principal(self) -> Optional[Principal]:
        if not self.token:
            return None

        try:
            payload = SecurityUtils.decode_access_token(
                self.token,
                settings.SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
            )
        except ValueError as e:
            log.info("Rejected bearer token", reason=str(e))
            raise AuthenticationError("Invalid or expired token") from e

        user_id = payload.get("user_id")
        if not isinstance(user_id, int):
            raise AuthenticationError("Invalid or expired token")

        user, manufacturer_id = await self.users.get_with_manufacturer(user_id)
        if user is None or not user.enabled:
            log.info("Token for unknown or disabled user", user_id=user_id)
            raise AuthenticationError("Invalid or expired token")

        roles = user.role_set or frozenset({Role.MANUFACTURER})
        return Principal(
            user_id=user.id,
            username=user.name,
            roles=roles,
            scope_id=None if Role.ADMIN in roles else manufacturer_id,
        )


class PrincipalResolver:
    """Resolves the Principal for one request from a SecurityContext."""

    def __init__(self, context: SecurityContext) -> None:
        self.context = context

    async def resolve(self) -> Principal:
        """Current principal, or the anonymous principal when no one is signed in."""
        principal = await self.context.current_principal()
        return principal if principal is not None else Principal.anonymous()

    async def resolve_required(self) -> Principal:
        """
        Current principal, which must be authenticated.

        Write paths do not call this. They resolve with resolve() and pass the
        principal to OwnershipGuard.enforce(), which raises the same 401 for
        an anonymous caller after any earlier pipeline stages have run. Use
        this for operations that need a signed-in caller but own no resource.

        Raises:
            AuthenticationError: no one is signed in
        """
        principal = await self.resolve()
        if principal.is_anonymous:
            raise AuthenticationError()
        return principal
