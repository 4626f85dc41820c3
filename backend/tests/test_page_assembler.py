"""
tests.test_page_assembler

Page assembler against a real (SQLite) database: concurrent row and count
queries, mapping, totals, and storage failures.
"""

import asyncio

import pytest

from taproom.shared.core.exceptions import StorageUnavailableError
from taproom.shared.db.session import build_engine, build_session_factory
from taproom.shared.query.assembler import PageAssembler, PageResult
from taproom.shared.query.composer import FilterSpec, PageRequest, SortSpec, compose
from taproom.shared.repositories import BEER_PROFILE, MANUFACTURER_PROFILE


MANUFACTURER_NAMES = [
    "Zeta", "Alpha", "Kappa", "Beta", "Iota", "Gamma",
    "Lambda", "Delta", "Theta", "Epsilon", "Eta", "Mu",
]


@pytest.fixture
async def twelve_manufacturers(seed):
    return [await seed.manufacturer(name) for name in MANUFACTURER_NAMES]


async def page_of(pages, profile, filters=None, sort="id", index=0, size=10, mapper=None):
    rows, count = compose(filters or FilterSpec(), SortSpec.parse(sort), PageRequest(index, size), profile)
    return await pages.assemble(rows, count, mapper or (lambda row: row.name))


async def test_first_page_sorted_by_name(pages, twelve_manufacturers):
    page = await page_of(pages, MANUFACTURER_PROFILE, sort="name,asc", index=0, size=5)

    assert list(page.content) == sorted(MANUFACTURER_NAMES)[:5]
    assert page.total_elements == 12
    assert page.total_pages == 3


async def test_last_partial_page_and_page_past_the_end(pages, twelve_manufacturers):
    last = await page_of(pages, MANUFACTURER_PROFILE, sort="name", index=2, size=5)
    assert list(last.content) == sorted(MANUFACTURER_NAMES)[10:]

    beyond = await page_of(pages, MANUFACTURER_PROFILE, sort="name", index=9, size=5)
    assert list(beyond.content) == []
    assert beyond.total_elements == 12


async def test_descending_sort(pages, twelve_manufacturers):
    page = await page_of(pages, MANUFACTURER_PROFILE, sort="name,desc", size=3)
    assert list(page.content) == sorted(MANUFACTURER_NAMES, reverse=True)[:3]


async def test_unknown_sort_column_orders_by_id(pages, twelve_manufacturers):
    page = await page_of(pages, MANUFACTURER_PROFILE, sort="secret_column", size=12)
    assert list(page.content) == MANUFACTURER_NAMES


async def test_zero_filters_match_everything(pages, twelve_manufacturers):
    page = await page_of(pages, MANUFACTURER_PROFILE, size=100)
    assert page.total_elements == len(MANUFACTURER_NAMES)


async def test_contains_filter_is_case_insensitive(pages, seed):
    await seed.manufacturer("Stone Brewing", country="USA")
    await seed.manufacturer("Brewdog", country="Scotland")
    await seed.manufacturer("Guinness", country="Ireland")

    page = await page_of(pages, MANUFACTURER_PROFILE, FilterSpec.of(name="BREW"), sort="name")
    assert list(page.content) == ["Brewdog", "Stone Brewing"]
    assert page.total_elements == 2


async def test_like_wildcards_in_filter_match_literally(pages, seed):
    await seed.manufacturer("100% Hops")
    await seed.manufacturer("Plain Hops")

    page = await page_of(pages, MANUFACTURER_PROFILE, FilterSpec.of(name="%"))
    assert list(page.content) == ["100% Hops"]


async def test_beer_range_and_manufacturer_filters(pages, seed):
    north = await seed.manufacturer("North")
    south = await seed.manufacturer("South")
    await seed.beer(north, "Light", abv=3.5)
    await seed.beer(north, "Pale", abv=5.0)
    await seed.beer(north, "Imperial", abv=9.5)
    await seed.beer(south, "Pale South", abv=5.2)

    page = await page_of(
        pages,
        BEER_PROFILE,
        FilterSpec.of(manufacturer_id=north.id, abv_min=4.0, abv_max=9.0),
    )
    assert list(page.content) == ["Pale"]
    assert page.total_elements == 1


async def test_mapper_is_applied_in_order(pages, seed):
    m = await seed.manufacturer("Mapper")
    await seed.beer(m, "A", abv=1.0)
    await seed.beer(m, "B", abv=2.0)

    page = await page_of(pages, BEER_PROFILE, sort="abv,desc", mapper=lambda beer: (beer.name, beer.abv))
    assert list(page.content) == [("B", 2.0), ("A", 1.0)]


async def test_storage_failure_is_translated(tmp_path):
    # Tables are never created in this database.
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        assembler = PageAssembler(build_session_factory(engine))
        rows, count = compose(FilterSpec(), SortSpec("id"), PageRequest(), BEER_PROFILE)
        with pytest.raises(StorageUnavailableError) as exc_info:
            await assembler.assemble(rows, count, lambda row: row)
        assert "no such table" not in exc_info.value.message
    finally:
        await engine.dispose()


def test_page_result_total_pages():
    page = PageResult(content=[1, 2], total_elements=7, page=PageRequest(0, 2))
    assert page.total_pages == 4
    assert PageResult(content=[], total_elements=0, page=PageRequest(0, 5)).total_pages == 0


class FailingRowsAssembler(PageAssembler):
    """Row query fails; count query blocks until cancelled."""

    def __init__(self) -> None:
        super().__init__(session_factory=None)
        self.count_started = asyncio.Event()
        self.count_cancelled = asyncio.Event()

    async def _fetch_rows(self, query):
        await self.count_started.wait()
        raise StorageUnavailableError()

    async def _fetch_count(self, query):
        self.count_started.set()
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.count_cancelled.set()
            raise
        return 0


async def test_failed_query_cancels_the_other():
    assembler = FailingRowsAssembler()
    rows, count = compose(FilterSpec(), SortSpec("id"), PageRequest(), BEER_PROFILE)

    with pytest.raises(StorageUnavailableError):
        await assembler.assemble(rows, count, lambda row: row)

    await asyncio.wait_for(assembler.count_cancelled.wait(), timeout=1)
