"""
Query Composer

Turns optional filters plus page/size/sort parameters into a row query and
a matching count query.

Safety Rules:
=============
- Filter values only ever reach SQL as bound parameters (SQLAlchemy Core
  expressions), never as text.
- Sort columns come from a closed allowlist (ListProfile.sortable). A
  requested column that is not in the allowlist is replaced with the
  profile's fallback column (id). The caller's token is never interpolated.

Composition:
============
    filters = FilterSpec.of(name="ale", abv_min=5)
    sort    = SortSpec.parse("abv,desc")
    page    = PageRequest(index=0, size=10)

    rows, count = compose(filters, sort, page, BEER_PROFILE)

    rows.statement()   →  SELECT beers.* FROM beers
                          WHERE lower(beers.name) LIKE lower(:p1) AND beers.abv >= :p2
                          ORDER BY beers.abv DESC, beers.id ASC
                          LIMIT :limit OFFSET :offset
    count.statement()  →  SELECT count(*) FROM beers
                          WHERE lower(beers.name) LIKE lower(:p1) AND beers.abv >= :p2

Zero filters produce the permissive predicate true(), so the count query
counts the whole table.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from sqlalchemy import Select, and_, func, select, true
from sqlalchemy.sql.elements import ColumnElement

from taproom.shared.core.exceptions import ValidationError
from taproom.shared.models.enums import SortDirection


LIKE_ESCAPE = "\\"


def normalize_column(token: str) -> str:
    """
    Canonical form of a sort column token.

    Case-insensitive and underscore-insensitive, so "manufacturerId",
    "manufacturer_id" and "MANUFACTURERID" resolve to the same column.
    """
    return token.strip().replace("_", "").lower()


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


# ═══════════════════════════════════════════════════════════════════════════════
# FILTERS
# ═══════════════════════════════════════════════════════════════════════════════


class FilterKind(str, Enum):
    """How a filter value constrains its column."""

    EQUALS = "equals"
    MIN = "min"
    MAX = "max"
    CONTAINS = "contains"


@dataclass(frozen=True)
class FilterField:
    """
    A filter a profile accepts.

    Attributes:
        name: Filter name as sent by the caller, e.g. "abv_min"
        column: Mapped column the filter constrains
        kind: Comparison applied
    """

    name: str
    column: Any
    kind: FilterKind

    def predicate(self, value: Any) -> ColumnElement[bool]:
        if self.kind is FilterKind.EQUALS:
            return self.column == value
        if self.kind is FilterKind.MIN:
            return self.column >= value
        if self.kind is FilterKind.MAX:
            return self.column <= value
        return self.column.ilike(f"%{escape_like(str(value))}%", escape=LIKE_ESCAPE)


class FilterSpec:
    """
    Immutable mapping of filter name to optional value.

    None and blank strings mean "no constraint".
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None) -> None:
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def of(cls, **values: Any) -> "FilterSpec":
        return cls(values)

    def present(self) -> Iterator[tuple[str, Any]]:
        """Yield (name, value) for every filter that constrains something."""
        for name, value in self._values.items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            yield name, value

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FilterSpec({dict(self._values)!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# SORTING & PAGING
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SortSpec:
    """
    Requested sort, parsed from "<column>[,asc|desc]".

    The column is kept exactly as the caller sent it; the composer decides
    whether it is allowed.
    """

    column: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: Optional[str], default_column: str = "id") -> "SortSpec":
        """
        Parse the sort wire format.

        Examples:
            "name"          → SortSpec("name", ASC)
            "name,desc"     → SortSpec("name", DESC)
            "name,DESC"     → SortSpec("name", DESC)
            "name,sideways" → SortSpec("name", ASC)
            None / ""       → SortSpec(default_column, ASC)
        """
        if raw is None or not raw.strip():
            return cls(column=default_column)

        column, _, direction = raw.partition(",")
        try:
            parsed = SortDirection(direction.strip().lower())
        except ValueError:
            parsed = SortDirection.ASC
        return cls(column=column.strip(), direction=parsed)


# Largest OFFSET a 64-bit SQL integer can carry.
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page request.

    Attributes:
        index: Page number, first page is 0
        size: Rows per page
    """

    index: int = 0
    size: int = 10

    @property
    def offset(self) -> int:
        return self.index * self.size

    @property
    def limit(self) -> int:
        return self.size

    def validate(self, max_size: Optional[int] = None) -> None:
        """
        Reject unusable paging before any query is built.

        Raises:
            ValidationError: negative index, non-positive size, size above
                max_size, or an offset too large for the database
        """
        if self.index < 0:
            raise ValidationError(
                "Page index must not be negative",
                details={"page": self.index},
            )
        if self.size <= 0:
            raise ValidationError(
                "Page size must be greater than zero",
                details={"size": self.size},
            )
        if max_size is not None and self.size > max_size:
            raise ValidationError(
                f"Page size must not exceed {max_size}",
                details={"size": self.size},
            )
        if self.offset > MAX_OFFSET:
            raise ValidationError(
                "Page index is too large",
                details={"page": self.index, "size": self.size},
            )


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILES & DESCRIPTORS
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ListProfile:
    """
    Per-entity listing rules.

    Attributes:
        model: Mapped class being listed
        sortable: Allowlist, normalized column token → mapped column
        filters: Accepted filters by name
        fallback: Column used when the requested sort is not allowed
    """

    model: Any
    sortable: Mapping[str, Any]
    filters: Mapping[str, FilterField] = field(default_factory=dict)
    fallback: Any = None

    @classmethod
    def build(
        cls,
        model: Any,
        sortable: Mapping[str, Any],
        filters: tuple[FilterField, ...] = (),
    ) -> "ListProfile":
        return cls(
            model=model,
            sortable=MappingProxyType({normalize_column(k): v for k, v in sortable.items()}),
            filters=MappingProxyType({f.name: f for f in filters}),
            fallback=model.id,
        )

    def resolve_sort_column(self, token: str) -> Any:
        return self.sortable.get(normalize_column(token), self.fallback)


@dataclass(frozen=True)
class CountQuery:
    """Count descriptor: same predicate as the row query, no sort or paging."""

    model: Any
    predicate: ColumnElement[bool]

    def statement(self) -> Select:
        return select(func.count()).select_from(self.model).where(self.predicate)


@dataclass(frozen=True)
class RowQuery:
    """Row descriptor: predicate, resolved sort, limit and offset."""

    model: Any
    predicate: ColumnElement[bool]
    order_by: tuple[Any, ...]
    page: PageRequest
    sort_column: Any

    @property
    def limit(self) -> int:
        return self.page.limit

    @property
    def offset(self) -> int:
        return self.page.offset

    def statement(self) -> Select:
        return (
            select(self.model)
            .where(self.predicate)
            .order_by(*self.order_by)
            .limit(self.limit)
            .offset(self.offset)
        )


def compose(
    filters: FilterSpec,
    sort: SortSpec,
    page: PageRequest,
    profile: ListProfile,
    max_size: Optional[int] = None,
) -> tuple[RowQuery, CountQuery]:
    """
    Build the row and count descriptors for one page.

    Args:
        filters: Optional constraints; names the profile does not define are ignored
        sort: Requested sort; column checked against profile.sortable
        page: Page index and size
        profile: Entity listing rules
        max_size: Largest page size accepted

    Returns:
        (RowQuery, CountQuery) sharing the same predicate

    Raises:
        ValidationError: invalid paging, raised before anything is built
    """
    page.validate(max_size)

    clauses = [
        profile.filters[name].predicate(value)
        for name, value in filters.present()
        if name in profile.filters
    ]
    predicate = and_(true(), *clauses)

    sort_column = profile.resolve_sort_column(sort.column)
    ordered = sort_column.desc() if sort.direction is SortDirection.DESC else sort_column.asc()
    order_by: tuple[Any, ...] = (ordered,)
    if sort_column is not profile.fallback:
        order_by += (profile.fallback.asc(),)

    rows = RowQuery(
        model=profile.model,
        predicate=predicate,
        order_by=order_by,
        page=page,
        sort_column=sort_column,
    )
    return rows, CountQuery(model=profile.model, predicate=predicate)
