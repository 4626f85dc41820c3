"""
Security Package

- principal: who is calling (Principal, PrincipalResolver, TokenSecurityContext)
- guard:     may they touch this resource (OwnershipGuard)
"""

from taproom.shared.security.principal import (
    Principal,
    PrincipalResolver,
    SecurityContext,
    TokenSecurityContext,
)
from taproom.shared.security.guard import (
    ADMIN_ONLY,
    MANUFACTURER_OWNER,
    DenyReason,
    OwnershipDecision,
    OwnershipGuard,
    OwnershipRequirement,
)

__all__ = [
    "Principal",
    "PrincipalResolver",
    "SecurityContext",
    "TokenSecurityContext",
    "ADMIN_ONLY",
    "MANUFACTURER_OWNER",
    "DenyReason",
    "OwnershipDecision",
    "OwnershipGuard",
    "OwnershipRequirement",
]
