"""
tests.test_principal_resolver

Principal resolution from an explicit security context, including the
JWT-backed context against the users table.
"""

from datetime import timedelta
from typing import Optional

import pytest

from taproom.config.settings import settings
from taproom.shared.core.exceptions import AuthenticationError
from taproom.shared.models import Role
from taproom.shared.repositories import UserRepository
from taproom.shared.security.principal import Principal, PrincipalResolver, TokenSecurityContext
from taproom.shared.services.auth_service import AuthService
from taproom.shared.utils.security import SecurityUtils


class StaticContext:
    def __init__(self, principal: Optional[Principal]) -> None:
        self.principal = principal

    async def current_principal(self) -> Optional[Principal]:
        return self.principal


async def test_missing_principal_resolves_to_anonymous():
    principal = await PrincipalResolver(StaticContext(None)).resolve()
    assert principal.is_anonymous
    assert principal.roles == frozenset({Role.ANONYMOUS})
    assert principal.user_id is None


async def test_resolve_required_rejects_anonymous():
    with pytest.raises(AuthenticationError):
        await PrincipalResolver(StaticContext(None)).resolve_required()


async def test_resolve_passes_principal_through():
    given = Principal(user_id=5, username="x", roles=frozenset({Role.MANUFACTURER}), scope_id=9)
    assert await PrincipalResolver(StaticContext(given)).resolve_required() is given


async def resolve_token(session, token: Optional[str]) -> Principal:
    return await PrincipalResolver(TokenSecurityContext(token, UserRepository(session))).resolve()


async def test_manufacturer_token_carries_manufacturer_scope(session, seed):
    manufacturer = await seed.manufacturer("Scoped", owner="scoped-owner")
    user = await UserRepository(session).get_by_name("scoped-owner")
    token, _ = AuthService.issue_token(user)

    principal = await resolve_token(session, token)

    assert principal.user_id == user.id
    assert principal.username == "scoped-owner"
    assert principal.roles == frozenset({Role.MANUFACTURER})
    assert principal.scope_id == manufacturer.id


async def test_admin_token_has_no_scope(session, seed):
    user = await seed.user("root", role=Role.ADMIN)
    token, _ = AuthService.issue_token(user)

    principal = await resolve_token(session, token)

    assert principal.is_admin
    assert principal.scope_id is None


async def test_no_token_is_anonymous(session):
    assert (await resolve_token(session, None)).is_anonymous


async def test_disabled_account_token_is_rejected(session, seed):
    user = await seed.user("gone", enabled=False)
    token, _ = AuthService.issue_token(user)

    with pytest.raises(AuthenticationError):
        await resolve_token(session, token)


async def test_token_for_deleted_user_is_rejected(session):
    token = SecurityUtils.create_access_token(
        data={"sub": "ghost", "user_id": 424242, "roles": ["MANUFACTURER"]},
        secret_key=settings.SECRET_KEY,
    )
    with pytest.raises(AuthenticationError):
        await resolve_token(session, token)


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        SecurityUtils.create_access_token({"user_id": 1}, secret_key="some-other-key"),
        SecurityUtils.create_access_token(
            {"user_id": 1},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=-5),
        ),
    ],
)
async def test_bad_tokens_are_rejected(session, token):
    with pytest.raises(AuthenticationError) as exc_info:
        await resolve_token(session, token)
    assert exc_info.value.status_code == 401
