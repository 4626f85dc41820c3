"""
Beer Service

Business logic for beers. A beer's owner scope is its manufacturer_id, so a
manufacturer account may only touch beers of the manufacturer it owns.

    create:  validate → check_manufacturer → authorize → insert → respond
    update:  load → authorize → apply → persist → respond
    delete:  load → authorize → delete

Reads and lists are public.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from taproom.config.settings import settings
from taproom.shared.core.exceptions import BeerNotFoundError, ManufacturerNotFoundError
from taproom.shared.core.logging import get_logger
from taproom.shared.core.pipeline import Pipeline, PipelineContext
from taproom.shared.models.beer import Beer
from taproom.shared.query.assembler import PageAssembler, PageResult
from taproom.shared.query.composer import FilterSpec, PageRequest, SortSpec, compose
from taproom.shared.repositories.beer_repository import BeerRepository
from taproom.shared.repositories.manufacturer_repository import ManufacturerRepository
from taproom.shared.schemas.beer import BeerReadResponse, BeerUpsertRequest, BeerUpsertResponse
from taproom.shared.security.guard import MANUFACTURER_OWNER, OwnershipGuard
from taproom.shared.security.principal import Principal
from taproom.shared.services.common import is_present, require_text


log = get_logger("taproom.beers")


class BeerService:
    """
    Service for beer-related business logic.

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
        self.beers = BeerRepository(session)
        self.manufacturers = ManufacturerRepository(session)

    async def create(
        self,
        manufacturer_id: int,
        request: BeerUpsertRequest,
        principal: Principal,
    ) -> BeerUpsertResponse:
        """
        Add a beer to a manufacturer.

        Raises:
            ValidationError: name is blank
            ManufacturerNotFoundError: no such manufacturer
            AuthenticationError / AuthorizationError: not admin or owner
        """
        pipeline = (
            Pipeline("beer.create", manufacturer_id=manufacturer_id, user_id=principal.user_id)
            .stage("validate", lambda ctx: require_text(request.name, "Beer name", "name"))
            .stage("check_manufacturer", lambda ctx: self._ensure_manufacturer(manufacturer_id))
            .stage("authorize", lambda ctx: self.guard.enforce(
                principal, MANUFACTURER_OWNER, manufacturer_id,
            ))
            .stage("insert", lambda ctx: self.beers.create(
                name=request.name,
                abv=request.abv,
                style=request.style,
                description=request.description,
                manufacturer_id=manufacturer_id,
            ))
            .stage("respond", self._respond_created)
        )
        return await pipeline.run()

    async def _ensure_manufacturer(self, manufacturer_id: int) -> None:
        if not await self.manufacturers.exists(manufacturer_id):
            raise ManufacturerNotFoundError(manufacturer_id)

    def _respond_created(self, ctx: PipelineContext) -> BeerUpsertResponse:
        beer = ctx["insert"]
        log.info("Beer created", beer_id=beer.id, manufacturer_id=beer.manufacturer_id)
        return BeerUpsertResponse(id=beer.id, name=beer.name)

    async def update(
        self,
        beer_id: int,
        request: BeerUpsertRequest,
        principal: Principal,
    ) -> BeerUpsertResponse:
        """
        Sparse update of name, abv, style and description.

        Raises:
            BeerNotFoundError: no such beer
            AuthenticationError / AuthorizationError: not admin or owner
        """
        pipeline = (
            Pipeline("beer.update", beer_id=beer_id, user_id=principal.user_id)
            .stage("load", lambda ctx: self._load(beer_id))
            .stage("authorize", lambda ctx: self.guard.enforce(
                principal, MANUFACTURER_OWNER, ctx["load"].manufacturer_id,
            ))
            .stage("apply", lambda ctx: self._apply(ctx["load"], request))
            .stage("persist", lambda ctx: self.beers.save(ctx["load"]))
            .stage("respond", self._respond_updated)
        )
        return await pipeline.run()

    async def _load(self, beer_id: int) -> Beer:
        beer = await self.beers.get(beer_id)
        if beer is None:
            raise BeerNotFoundError(beer_id)
        return beer

    @staticmethod
    def _apply(beer: Beer, request: BeerUpsertRequest) -> None:
        if is_present(request.name):
            beer.name = request.name
        if is_present(request.abv):
            beer.abv = request.abv
        if is_present(request.style):
            beer.style = request.style
        if is_present(request.description):
            beer.description = request.description

    def _respond_updated(self, ctx: PipelineContext) -> BeerUpsertResponse:
        beer = ctx["persist"]
        log.info("Beer updated", beer_id=beer.id)
        return BeerUpsertResponse(id=beer.id, name=beer.name)

    async def read(self, beer_id: int) -> BeerReadResponse:
        return BeerReadResponse.model_validate(await self._load(beer_id))

    async def list(
        self,
        filters: FilterSpec,
        sort: SortSpec,
        page: PageRequest,
    ) -> PageResult[BeerReadResponse]:
        rows, count = compose(
            filters,
            sort,
            page,
            BeerRepository.list_profile,
            max_size=settings.MAX_PAGE_SIZE,
        )
        return await self.pages.assemble(rows, count, BeerReadResponse.model_validate)

    async def delete(self, beer_id: int, principal: Principal) -> None:
        """
        Raises:
            BeerNotFoundError: no such beer
            AuthenticationError / AuthorizationError: not admin or owner
        """
        pipeline = (
            Pipeline("beer.delete", beer_id=beer_id, user_id=principal.user_id)
            .stage("load", lambda ctx: self._load(beer_id))
            .stage("authorize", lambda ctx: self.guard.enforce(
                principal, MANUFACTURER_OWNER, ctx["load"].manufacturer_id,
            ))
            .stage("delete", lambda ctx: self.beers.delete(ctx["load"]))
        )
        await pipeline.run()
        log.info("Beer deleted", beer_id=beer_id)
