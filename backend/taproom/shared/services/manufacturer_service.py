"""
Manufacturer Service

Business logic for manufacturers and the accounts that own them.

Every write is a Pipeline of named stages that runs strictly in order and
stops at the first stage that raises:

    create:  authorize → validate → check_user_name → create_account
             → create_manufacturer → respond
    update:  load → authorize → check_user_name → apply → persist → respond
    delete:  load → check_beers → authorize → delete

Reads and lists are public.

Account + Manufacturer Atomicity:
=================================
create writes two rows (users, manufacturers). No compensation is attempted
here if the second insert fails; both writes happen on the request session,
and get_db() rolls them back together.

Usage:
======
    service = ManufacturerService(db, PageAssembler(session_factory))
    created = await service.create(request, principal)
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taproom.config.settings import settings
from taproom.shared.core.exceptions import DependencyError, DuplicateResourceError, ManufacturerNotFoundError
from taproom.shared.core.logging import get_logger
from taproom.shared.core.pipeline import Pipeline, PipelineContext
from taproom.shared.models.enums import Role
from taproom.shared.models.manufacturer import Manufacturer
from taproom.shared.query.assembler import PageAssembler, PageResult
from taproom.shared.query.composer import FilterSpec, PageRequest, SortSpec, compose
from taproom.shared.repositories.beer_repository import BeerRepository
from taproom.shared.repositories.manufacturer_repository import ManufacturerRepository
from taproom.shared.repositories.user_repository import UserRepository
from taproom.shared.schemas.manufacturer import (
    ManufacturerReadResponse,
    ManufacturerUpsertRequest,
    ManufacturerUpsertResponse,
)
from taproom.shared.security.guard import ADMIN_ONLY, MANUFACTURER_OWNER, OwnershipGuard
from taproom.shared.security.principal import Principal
from taproom.shared.services.common import is_present, require_text
from taproom.shared.utils.security import SecurityUtils


log = get_logger("taproom.manufacturers")


class ManufacturerService:
    """
    Service for manufacturer-related business logic.

    Handles:
    - Creating a manufacturer together with its owning account (admin only)
    - Sparse updates by an admin or the owning manufacturer
    - Deleting a manufacturer that has no beers
    - Public read and paginated listing

    Attributes:
        session: Database session for reads and writes
        pages: Page assembler for list queries
        guard: Ownership guard
    """

    def __init__(
        self,
        session: AsyncSession,
        pages: PageAssembler,
        guard: Optional[OwnershipGuard] = None,
    ) -> None:
        self.session = session
        self.pages = pages
        self.guard = guard or OwnershipGuard()
        self.manufacturers = ManufacturerRepository(session)
        self.beers = BeerRepository(session)
        self.users = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(
        self,
        request: ManufacturerUpsertRequest,
        principal: Principal,
    ) -> ManufacturerUpsertResponse:
        """
        Create a manufacturer and its owning account.

        Raises:
            AuthenticationError / AuthorizationError: caller is not an admin
            ValidationError: userName, password or name blank
            DuplicateResourceError: userName already taken
        """
        pipeline = (
            Pipeline("manufacturer.create", user_id=principal.user_id)
            .stage("authorize", lambda ctx: self.guard.enforce(principal, ADMIN_ONLY, None))
            .stage("validate", lambda ctx: self._validate_create(request))
            .stage("check_user_name", lambda ctx: self._ensure_user_name_free(request.user_name))
            .stage("create_account", lambda ctx: self._create_account(request))
            .stage("create_manufacturer", lambda ctx: self.manufacturers.create(
                name=request.name,
                country=request.country,
                user_id=ctx["create_account"].id,
            ))
            .stage("respond", self._respond_created)
        )
        return await pipeline.run()

    def _validate_create(self, request: ManufacturerUpsertRequest) -> None:
        require_text(request.user_name, "User name", "userName")
        require_text(request.password, "Password", "password")
        require_text(request.name, "Manufacturer name", "name")

    async def _ensure_user_name_free(
        self,
        user_name: str,
        exclude_user_id: Optional[int] = None,
    ) -> None:
        if await self.users.name_exists(user_name, exclude_id=exclude_user_id):
            raise DuplicateResourceError(
                f"User with name {user_name} already exists",
                details={"field": "userName"},
            )

    async def _create_account(self, request: ManufacturerUpsertRequest):
        return await self.users.create(
            name=request.user_name,
            password=await SecurityUtils.hash_password(request.password),
            roles=Role.MANUFACTURER.value,
            enabled=True if request.user_enabled is None else request.user_enabled,
        )

    def _respond_created(self, ctx: PipelineContext) -> ManufacturerUpsertResponse:
        manufacturer = ctx["create_manufacturer"]
        log.info(
            "Manufacturer created",
            manufacturer_id=manufacturer.id,
            account_id=ctx["create_account"].id,
        )
        return ManufacturerUpsertResponse(id=manufacturer.id, name=manufacturer.name)

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        manufacturer_id: int,
        request: ManufacturerUpsertRequest,
        principal: Principal,
    ) -> ManufacturerUpsertResponse:
        """
        Sparse update: only non-null, non-blank fields are applied.

        A new password is re-hashed. userName/password/userEnabled change the
        owning account.

        Raises:
            ManufacturerNotFoundError: no such manufacturer
            AuthenticationError / AuthorizationError: not admin or owner
            DuplicateResourceError: new userName belongs to another account
        """
        pipeline = (
            Pipeline("manufacturer.update", manufacturer_id=manufacturer_id, user_id=principal.user_id)
            .stage("load", lambda ctx: self._load(manufacturer_id))
            .stage("authorize", lambda ctx: self.guard.enforce(
                principal, MANUFACTURER_OWNER, ctx["load"].id,
            ))
            .stage("check_user_name", self._check_renamed_user)
            .stage("apply", lambda ctx: self._apply(ctx["load"], request))
            .stage("persist", lambda ctx: self.manufacturers.save(ctx["load"]))
            .stage("respond", self._respond_updated)
        )
        return await pipeline.run(request=request)

    async def _load(self, manufacturer_id: int) -> Manufacturer:
        manufacturer = await self.manufacturers.get(manufacturer_id)
        if manufacturer is None:
            raise ManufacturerNotFoundError(manufacturer_id)
        return manufacturer

    async def _check_renamed_user(self, ctx: PipelineContext) -> None:
        user_name = ctx.inputs["request"].user_name
        if is_present(user_name):
            await self._ensure_user_name_free(user_name, exclude_user_id=ctx["load"].user_id)

    async def _apply(self, manufacturer: Manufacturer, request: ManufacturerUpsertRequest) -> None:
        if is_present(request.name):
            manufacturer.name = request.name
        if is_present(request.country):
            manufacturer.country = request.country

        if manufacturer.user_id is None:
            return
        touches_account = (
            is_present(request.user_name)
            or is_present(request.password)
            or request.user_enabled is not None
        )
        if not touches_account:
            return

        user = await self.users.get(manufacturer.user_id)
        if user is None:
            return
        if is_present(request.user_name):
            user.name = request.user_name
        if is_present(request.password):
            user.password = await SecurityUtils.hash_password(request.password)
        if request.user_enabled is not None:
            user.enabled = request.user_enabled
        await self.users.save(user)

    def _respond_updated(self, ctx: PipelineContext) -> ManufacturerUpsertResponse:
        manufacturer = ctx["persist"]
        log.info("Manufacturer updated", manufacturer_id=manufacturer.id)
        return ManufacturerUpsertResponse(id=manufacturer.id, name=manufacturer.name)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ & LIST
    # ═══════════════════════════════════════════════════════════════════════════

    async def read(self, manufacturer_id: int) -> ManufacturerReadResponse:
        """
        Raises:
            ManufacturerNotFoundError: no such manufacturer
        """
        manufacturer = await self._load(manufacturer_id)
        return ManufacturerReadResponse.model_validate(manufacturer)

    async def list(
        self,
        filters: FilterSpec,
        sort: SortSpec,
        page: PageRequest,
    ) -> PageResult[ManufacturerReadResponse]:
        """
        One page of manufacturers.

        Raises:
            ValidationError: invalid page index or size
        """
        rows, count = compose(
            filters,
            sort,
            page,
            ManufacturerRepository.list_profile,
            max_size=settings.MAX_PAGE_SIZE,
        )
        return await self.pages.assemble(rows, count, ManufacturerReadResponse.model_validate)

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, manufacturer_id: int, principal: Principal) -> None:
        """
        Delete a manufacturer and its owning account.

        Raises:
            ManufacturerNotFoundError: no such manufacturer
            DependencyError: beers still reference the manufacturer
            AuthenticationError / AuthorizationError: not admin or owner
        """
        pipeline = (
            Pipeline("manufacturer.delete", manufacturer_id=manufacturer_id, user_id=principal.user_id)
            .stage("load", lambda ctx: self._load(manufacturer_id))
            .stage("check_beers", lambda ctx: self._ensure_no_beers(manufacturer_id))
            .stage("authorize", lambda ctx: self.guard.enforce(
                principal, MANUFACTURER_OWNER, ctx["load"].id,
            ))
            .stage("delete", lambda ctx: self._delete(ctx["load"]))
        )
        await pipeline.run()

    async def _ensure_no_beers(self, manufacturer_id: int) -> None:
        if await self.beers.exists_by_manufacturer(manufacturer_id):
            raise DependencyError(
                f"Cannot delete manufacturer with id {manufacturer_id} because it has associated beers",
                details={"manufacturer_id": manufacturer_id},
            )

    async def _delete(self, manufacturer: Manufacturer) -> None:
        manufacturer_id, user_id = manufacturer.id, manufacturer.user_id
        await self.manufacturers.delete(manufacturer)
        if user_id is not None:
            user = await self.users.get(user_id)
            if user is not None:
                await self.users.delete(user)
        log.info("Manufacturer deleted", manufacturer_id=manufacturer_id, account_id=user_id)
