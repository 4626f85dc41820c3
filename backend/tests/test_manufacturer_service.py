"""
tests.test_manufacturer_service

Manufacturer service: create with account, sparse update, ownership,
dependency-guarded delete, public read and list.
"""

import pytest

from taproom.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DependencyError,
    DuplicateResourceError,
    ManufacturerNotFoundError,
    ValidationError,
)
from taproom.shared.models import Role
from taproom.shared.query.composer import FilterSpec, PageRequest, SortSpec
from taproom.shared.repositories import ManufacturerRepository, UserRepository
from taproom.shared.schemas.manufacturer import ManufacturerUpsertRequest
from taproom.shared.security.principal import Principal
from taproom.shared.services.manufacturer_service import ManufacturerService
from taproom.shared.utils.security import SecurityUtils

from tests.conftest import owner_of


@pytest.fixture
def service(session, pages) -> ManufacturerService:
    return ManufacturerService(session, pages)


def upsert(**fields) -> ManufacturerUpsertRequest:
    return ManufacturerUpsertRequest(**fields)


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_admin_creates_manufacturer_and_account(service, session, admin):
    created = await service.create(
        upsert(user_name="brew1", password="s3cret", name="Brew One", country="DE"),
        admin,
    )

    assert created.name == "Brew One"
    manufacturer = await ManufacturerRepository(session).get(created.id)
    user = await UserRepository(session).get_by_name("brew1")
    assert manufacturer.user_id == user.id
    assert manufacturer.country == "DE"
    assert user.role_set == frozenset({Role.MANUFACTURER})
    assert user.enabled is True
    assert user.password != "s3cret"
    assert await SecurityUtils.verify_password("s3cret", user.password)


async def test_create_honours_user_enabled_flag(service, session, admin):
    await service.create(
        upsert(user_name="off", password="pw", name="Off", user_enabled=False),
        admin,
    )
    assert (await UserRepository(session).get_by_name("off")).enabled is False


async def test_duplicate_user_name_is_rejected(service, admin):
    await service.create(upsert(user_name="brew1", password="pw", name="First"), admin)

    with pytest.raises(DuplicateResourceError) as exc_info:
        await service.create(upsert(user_name="brew1", password="pw", name="Second"), admin)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "User with name brew1 already exists"


async def test_user_name_race_surfaces_as_conflict(session):
    users = UserRepository(session)
    await users.create(name="brew1", password="x", roles=Role.MANUFACTURER.value, enabled=True)

    # A concurrent create that passed the name check before the first insert.
    with pytest.raises(ConflictError) as exc_info:
        await users.create(name="brew1", password="y", roles=Role.MANUFACTURER.value, enabled=True)

    assert exc_info.value.status_code == 409
    assert exc_info.value.error_code == "CONFLICT"
    assert "UNIQUE" not in exc_info.value.message


async def test_manufacturer_names_need_not_be_unique(service, admin):
    first = await service.create(upsert(user_name="a", password="pw", name="Same"), admin)
    second = await service.create(upsert(user_name="b", password="pw", name="Same"), admin)
    assert first.id != second.id


@pytest.mark.parametrize(
    "fields, field",
    [
        ({"password": "pw", "name": "N"}, "userName"),
        ({"user_name": "u", "password": "  ", "name": "N"}, "password"),
        ({"user_name": "u", "password": "pw", "name": ""}, "name"),
    ],
)
async def test_create_requires_fields(service, admin, fields, field):
    with pytest.raises(ValidationError) as exc_info:
        await service.create(upsert(**fields), admin)
    assert exc_info.value.details["field"] == field


async def test_create_is_admin_only(service, seed):
    manufacturer = await seed.manufacturer("Existing")
    request = upsert(user_name="u", password="pw", name="N")

    with pytest.raises(AuthenticationError):
        await service.create(request, Principal.anonymous())

    with pytest.raises(AuthorizationError) as exc_info:
        await service.create(request, owner_of(manufacturer))
    assert exc_info.value.details["reason"] == "INSUFFICIENT_ROLE"


async def test_authorization_runs_before_validation(service):
    with pytest.raises(AuthenticationError):
        await service.create(upsert(), Principal.anonymous())


# ═══════════════════════════════════════════════════════════════════════════════
# UPDATE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_owner_updates_only_sent_fields(service, seed):
    manufacturer = await seed.manufacturer("Old Name", country="BE")

    updated = await service.update(
        manufacturer.id,
        upsert(name="New Name", country="   "),
        owner_of(manufacturer),
    )

    assert updated.name == "New Name"
    read = await service.read(manufacturer.id)
    assert read.country == "BE"


async def test_update_account_fields(service, session, seed, admin):
    manufacturer = await seed.manufacturer("Acc", owner="acc-owner")

    await service.update(
        manufacturer.id,
        upsert(user_name="acc-renamed", password="new-pw", user_enabled=False),
        admin,
    )

    user = await UserRepository(session).get(manufacturer.user_id)
    assert user.name == "acc-renamed"
    assert user.enabled is False
    assert await SecurityUtils.verify_password("new-pw", user.password)


async def test_update_keeping_own_user_name_is_allowed(service, seed):
    manufacturer = await seed.manufacturer("Keep", owner="keeper")
    await service.update(manufacturer.id, upsert(user_name="keeper"), owner_of(manufacturer))


async def test_update_to_taken_user_name_is_rejected(service, seed):
    await seed.user("taken")
    manufacturer = await seed.manufacturer("Mine")

    with pytest.raises(DuplicateResourceError):
        await service.update(manufacturer.id, upsert(user_name="taken"), owner_of(manufacturer))


async def test_other_owner_cannot_update(service, seed):
    mine = await seed.manufacturer("Mine")
    theirs = await seed.manufacturer("Theirs")

    with pytest.raises(AuthorizationError) as exc_info:
        await service.update(theirs.id, upsert(name="Hijacked"), owner_of(mine))

    assert exc_info.value.details["reason"] == "WRONG_OWNER"
    assert (await service.read(theirs.id)).name == "Theirs"


async def test_update_missing_manufacturer(service, admin):
    with pytest.raises(ManufacturerNotFoundError) as exc_info:
        await service.update(999, upsert(name="x"), admin)
    assert exc_info.value.message == "Manufacturer with id 999 not found"


# ═══════════════════════════════════════════════════════════════════════════════
# READ & LIST
# ═══════════════════════════════════════════════════════════════════════════════


async def test_read_is_idempotent(service, seed):
    manufacturer = await seed.manufacturer("Reader", country="NL")

    first = await service.read(manufacturer.id)
    second = await service.read(manufacturer.id)

    assert first == second
    assert first.model_dump() == {"id": manufacturer.id, "name": "Reader", "country": "NL"}


async def test_read_missing(service):
    with pytest.raises(ManufacturerNotFoundError):
        await service.read(12345)


async def test_list_sorted_page(service, seed):
    for name in ["C", "A", "B"]:
        await seed.manufacturer(name)

    page = await service.list(FilterSpec(), SortSpec.parse("name,desc"), PageRequest(0, 2))

    assert [item.name for item in page.content] == ["C", "B"]
    assert page.total_elements == 3


async def test_list_rejects_oversized_page(service):
    with pytest.raises(ValidationError):
        await service.list(FilterSpec(), SortSpec("name"), PageRequest(0, 10_000))


# ═══════════════════════════════════════════════════════════════════════════════
# DELETE
# ═══════════════════════════════════════════════════════════════════════════════


async def test_delete_removes_manufacturer_and_account(service, session, seed):
    manufacturer = await seed.manufacturer("Doomed", owner="doomed-owner")
    user_id = manufacturer.user_id

    await service.delete(manufacturer.id, owner_of(manufacturer))

    assert not await ManufacturerRepository(session).exists(manufacturer.id)
    assert not await UserRepository(session).exists(user_id)


async def test_delete_with_beers_is_refused(service, seed, admin):
    manufacturer = await seed.manufacturer("Busy")
    await seed.beer(manufacturer, "Still Here")

    with pytest.raises(DependencyError) as exc_info:
        await service.delete(manufacturer.id, admin)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == (
        f"Cannot delete manufacturer with id {manufacturer.id} because it has associated beers"
    )
    assert (await service.read(manufacturer.id)).name == "Busy"


async def test_dependency_check_runs_before_authorization(service, seed):
    manufacturer = await seed.manufacturer("Busy")
    await seed.beer(manufacturer, "Still Here")

    with pytest.raises(DependencyError):
        await service.delete(manufacturer.id, Principal.anonymous())


async def test_delete_by_other_owner_is_forbidden(service, seed):
    mine = await seed.manufacturer("Mine")
    theirs = await seed.manufacturer("Theirs")

    with pytest.raises(AuthorizationError):
        await service.delete(theirs.id, owner_of(mine))


async def test_delete_missing(service, admin):
    with pytest.raises(ManufacturerNotFoundError):
        await service.delete(404, admin)
