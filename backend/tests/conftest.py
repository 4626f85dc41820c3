"""
tests.conftest

Shared fixtures.

Responsibilities:
- One SQLite (aiosqlite) database file per test, tables created from metadata.
- Seed helpers for accounts, manufacturers and beers.
- An httpx client bound to the FastAPI app with the database dependencies
  pointed at the test database.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from taproom.api.dependencies.database import get_db, get_session_factory
from taproom.api.main import create_application
from taproom.shared.db.session import build_engine, build_session_factory
from taproom.shared.models import Base, Beer, Manufacturer, Role, User
from taproom.shared.query.assembler import PageAssembler
from taproom.shared.security.principal import Principal
from taproom.shared.utils.security import SecurityUtils, pwd_context


@pytest.fixture(autouse=True, scope="session")
def fast_password_hashing() -> None:
    # Minimum bcrypt cost keeps the suite fast.
    pwd_context.update(bcrypt__rounds=4)


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'taproom.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def pages(session_factory) -> PageAssembler:
    return PageAssembler(session_factory)


# ═══════════════════════════════════════════════════════════════════════════════
# SEEDING
# ═══════════════════════════════════════════════════════════════════════════════


class Seeder:
    """Inserts rows directly and commits, so other sessions can see them."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def user(
        self,
        name: str,
        password: str = "s3cret",
        role: Role = Role.MANUFACTURER,
        enabled: bool = True,
    ) -> User:
        user = User(
            name=name,
            password=await SecurityUtils.hash_password(password),
            roles=role.value,
            enabled=enabled,
        )
        self.session.add(user)
        await self.session.commit()
        return user

    async def manufacturer(
        self,
        name: str,
        country: Optional[str] = None,
        owner: Optional[str] = None,
    ) -> Manufacturer:
        user = await self.user(owner or f"{name.lower().replace(' ', '-')}-owner")
        manufacturer = Manufacturer(name=name, country=country, user_id=user.id)
        self.session.add(manufacturer)
        await self.session.commit()
        return manufacturer

    async def beer(self, manufacturer: Manufacturer, name: str, **fields) -> Beer:
        beer = Beer(name=name, manufacturer_id=manufacturer.id, **fields)
        self.session.add(beer)
        await self.session.commit()
        return beer


@pytest.fixture
def seed(session) -> Seeder:
    return Seeder(session)


# ═══════════════════════════════════════════════════════════════════════════════
# PRINCIPALS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def admin() -> Principal:
    return Principal(user_id=1000, username="admin", roles=frozenset({Role.ADMIN}))


def owner_of(manufacturer: Manufacturer) -> Principal:
    return Principal(
        user_id=manufacturer.user_id,
        username=f"owner-{manufacturer.id}",
        roles=frozenset({Role.MANUFACTURER}),
        scope_id=manufacturer.id,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HTTP
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_application()

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


async def login(client: httpx.AsyncClient, username: str, password: str) -> dict[str, str]:
    response = await client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
