"""
Ownership Guard

Decides whether a principal may mutate a resource owned by a given scope.

Decision Order:
===============
    1. anonymous principal                    → DENY(UNAUTHENTICATED)
    2. principal is ADMIN                      → ALLOW
    3. principal has none of required roles    → DENY(INSUFFICIENT_ROLE)
    4. resource has no owner (owner is None)   → ALLOW
    5. requirement does not match scopes       → ALLOW
    6. principal.scope_id == owner scope       → ALLOW
       otherwise                               → DENY(WRONG_OWNER)

authorize() is pure and synchronous. enforce() turns a DENY into the matching
exception: UNAUTHENTICATED → AuthenticationError (401), the other reasons →
AuthorizationError (403). Both 403 reasons share one message; the reason is
logged and attached to details["reason"].
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from taproom.shared.core.exceptions import AuthenticationError, AuthorizationError
from taproom.shared.core.logging import get_logger
from taproom.shared.models.enums import Role
from taproom.shared.security.principal import Principal


log = get_logger("taproom.security")

UNRESTRICTED_ROLES = frozenset({Role.ADMIN})


class DenyReason(str, Enum):
    WRONG_OWNER = "WRONG_OWNER"
    INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"
    UNAUTHENTICATED = "UNAUTHENTICATED"


@dataclass(frozen=True)
class OwnershipDecision:
    """ALLOW when reason is None, otherwise DENY(reason)."""

    reason: Optional[DenyReason] = None

    @property
    def allowed(self) -> bool:
        return self.reason is None

    @classmethod
    def allow(cls) -> "OwnershipDecision":
        return cls()

    @classmethod
    def deny(cls, reason: DenyReason) -> "OwnershipDecision":
        return cls(reason=reason)


@dataclass(frozen=True)
class OwnershipRequirement:
    """
    Who may perform an operation.

    Attributes:
        roles: Roles allowed at all (ADMIN is always allowed)
        scope_match: Whether the principal's scope must equal the owner scope
    """

    roles: frozenset[Role]
    scope_match: bool = True


ADMIN_ONLY = OwnershipRequirement(roles=frozenset({Role.ADMIN}), scope_match=False)
MANUFACTURER_OWNER = OwnershipRequirement(roles=frozenset({Role.ADMIN, Role.MANUFACTURER}))


class OwnershipGuard:
    """Role and owner-scope check shared by the manufacturer and beer services."""

    def authorize(
        self,
        principal: Principal,
        requirement: OwnershipRequirement,
        owner_scope_id: Optional[int],
    ) -> OwnershipDecision:
        if principal.is_anonymous:
            return OwnershipDecision.deny(DenyReason.UNAUTHENTICATED)
        if principal.has_any(UNRESTRICTED_ROLES):
            return OwnershipDecision.allow()
        if not principal.has_any(requirement.roles):
            return OwnershipDecision.deny(DenyReason.INSUFFICIENT_ROLE)
        if owner_scope_id is None:
            # Global resource: nothing to own.
            return OwnershipDecision.allow()
        if not requirement.scope_match:
            return OwnershipDecision.allow()
        if principal.scope_id == owner_scope_id:
            return OwnershipDecision.allow()
        return OwnershipDecision.deny(DenyReason.WRONG_OWNER)

    def enforce(
        self,
        principal: Principal,
        requirement: OwnershipRequirement,
        owner_scope_id: Optional[int],
    ) -> None:
        """
        authorize() and raise on DENY.

        Raises:
            AuthenticationError: caller is anonymous
            AuthorizationError: wrong owner or insufficient role
        """
        decision = self.authorize(principal, requirement, owner_scope_id)
        if decision.allowed:
            return

        reason = decision.reason.value
        log.warning(
            "Access denied",
            reason=reason,
            user_id=principal.user_id,
            scope_id=principal.scope_id,
            owner_scope_id=owner_scope_id,
        )
        if decision.reason is DenyReason.UNAUTHENTICATED:
            raise AuthenticationError(details={"reason": reason})
        raise AuthorizationError(details={"reason": reason})
