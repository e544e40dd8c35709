from typing import List, Optional

from apps.places.schemas.search import CamelModel


class UserResponse(CamelModel):
    id: int


class UserStats(CamelModel):
    total_places: int
    total_lists: int
    visited_count: int
    want_to_go_count: int


class RatingBucket(CamelModel):
    range: str
    count: int


class GenreStat(CamelModel):
    genre: str
    count: int
    avg_rating: Optional[float] = None


class VisitEntry(CamelModel):
    id: int
    name: str
    genre: Optional[str] = None
    visited_at: str
    user_rating: Optional[int] = None


class DetailedStats(CamelModel):
    rating_distribution: List[RatingBucket]
    genre_stats: List[GenreStat]
    visit_history: List[VisitEntry]
    avg_rating: Optional[float] = None
    rated_count: int
