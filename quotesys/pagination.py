"""Cursor pagination over id-ordered sequences."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from typing import Generic, Protocol, Sequence, TypeVar

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 50


class HasId(Protocol):
    @property
    def id(self) -> int | None: ...


ItemT = TypeVar("ItemT", bound=HasId)


@dataclass(frozen=True, slots=True)
class Page(Generic[ItemT]):
    """One window of a paginated sequence."""

    items: list[ItemT] = field(default_factory=list)
    next_cursor: int | None = None
    has_more: bool = False


def clamp_limit(
    value: int | None,
    *,
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    """Clamp a requested page size into ``[1, maximum]``; ``None`` selects ``default``."""

    if value is None:
        value = default
    return max(1, min(value, maximum))


def start_index(ids: Sequence[int], cursor: int | None) -> int:
    """Index of the first item after ``cursor`` in ascending ``ids``.

    A cursor that matches no id is treated as an insertion point, so the window
    starts at the first id greater than it.
    """

    if cursor is None:
        return 0
    return bisect.bisect_right(ids, cursor)


def paginate(items: Sequence[ItemT], cursor: int | None, limit: int) -> Page[ItemT]:
    """Return the page of ``items`` (ascending by id) that follows ``cursor``."""

    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")

    ids = [item.id for item in items]
    start = start_index(ids, cursor)  # type: ignore[arg-type]
    window = list(items[start : start + limit + 1])

    has_more = len(window) > limit
    data = window[:limit]
    next_cursor = data[-1].id if has_more and data else None
    return Page(items=data, next_cursor=next_cursor, has_more=has_more)


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "Page", "clamp_limit", "paginate", "start_index"]
