"""Page slicing for ranked result sets"""

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    limit: int
    has_more: bool


def paginate(ranked: Sequence[T], page: int, limit: int) -> Page[T]:
    """Slice ``[(page-1)*limit, page*limit)`` out of the full ranked sequence.

    ``page`` is 1-based and ``limit`` positive; both are clamped by the filter
    normalizer before they get here.
    """
    total = len(ranked)
    start = (page - 1) * limit
    end = page * limit
    return Page(
        items=list(ranked[start:end]),
        total=total,
        page=page,
        limit=limit,
        has_more=end < total,
    )
