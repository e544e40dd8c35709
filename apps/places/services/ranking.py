#!/usr/bin/env python3
"""Sort strategies for filtered place search.

Every strategy is a total order: equal keys fall back to ascending place id,
so the same candidate set always produces the same pages.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple

from apps.places.masters import DEFAULT_SORT
from apps.places.models import Place, PlaceStatus

logger = logging.getLogger(__name__)

# recommended-score weights
USER_RATING_WEIGHT = 0.5
PROVIDER_RATING_WEIGHT = 0.3
WANT_TO_GO_BONUS = 0.5
VISITED_BONUS = 0.2
PROXIMITY_BONUS = 0.5


@dataclass
class Candidate:
    """A fetched place with its computed distance (km, None when unknown)"""
    place: Place
    distance_km: Optional[float] = None

    @property
    def id(self) -> int:
        return self.place.id


def recommended_score(candidate: Candidate) -> float:
    """Composite score: ratings, status bonus and a soft proximity bonus."""
    place = candidate.place
    score = 0.0
    if place.user_rating is not None:
        score += USER_RATING_WEIGHT * float(place.user_rating)
    if place.rating is not None:
        score += PROVIDER_RATING_WEIGHT * float(place.rating)
    if place.status == PlaceStatus.WANT_TO_GO.value:
        score += WANT_TO_GO_BONUS
    elif place.status == PlaceStatus.VISITED.value:
        score += VISITED_BONUS
    if candidate.distance_km is not None:
        score += PROXIMITY_BONUS / (1.0 + candidate.distance_km)
    return score


def _recommended_key(c: Candidate) -> Tuple:
    return (-recommended_score(c), c.id)


def _distance_key(c: Candidate) -> Tuple:
    if c.distance_km is None:
        return (1, 0.0, c.id)
    return (0, c.distance_km, c.id)


def _rating_key(c: Candidate) -> Tuple:
    rating = c.place.rating
    if rating is None:
        return (1, 0.0, c.id)
    return (0, -float(rating), c.id)


def _reviews_key(c: Candidate) -> Tuple:
    count = c.place.review_count
    if count is None:
        # no review count: fall back to rating order behind the counted ones
        return (1, 0) + _rating_key(c)
    return (0, -count) + _rating_key(c)


def _new_key(c: Candidate) -> Tuple:
    created: Optional[datetime] = c.place.created_at
    if created is None:
        return (1, 0.0, c.id)
    return (0, -created.timestamp(), c.id)


SORT_STRATEGIES: Dict[str, Callable[[Candidate], Tuple]] = {
    "recommended": _recommended_key,
    "distance": _distance_key,
    "rating": _rating_key,
    "reviews": _reviews_key,
    "new": _new_key,
}


def rank(candidates: List[Candidate], sort: str = DEFAULT_SORT) -> List[Candidate]:
    """Order candidates by the requested sort key (unknown keys rank as recommended)."""
    key = SORT_STRATEGIES.get(sort)
    if key is None:
        logger.debug("Unknown sort key %r, using %s", sort, DEFAULT_SORT)
        key = SORT_STRATEGIES[DEFAULT_SORT]
    return sorted(candidates, key=key)
