#!/usr/bin/env python3
"""Filtered place search: normalize → compose predicates → fetch → distance → rank → paginate"""

import time
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from apps.core.config import settings
from apps.places.masters import DEFAULT_SORT, SORT_KEYS
from apps.places.models import Place
from apps.places.schemas.search import SearchFilters
from apps.places.services.geo import build_directions_url, distance_from, geo_bbox, within_radius
from apps.places.services.pagination import paginate
from apps.places.services.ranking import Candidate, rank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedFilters:
    """Canonical filter set with defaults applied"""
    origin: Optional[Tuple[float, float]] = None
    radius_m: Optional[float] = None
    prefecture: Optional[str] = None
    genre_parent: Optional[str] = None
    genre_child: Optional[str] = None
    budget_type: Optional[str] = None
    budget_band: Optional[str] = None
    features: Tuple[str, ...] = field(default_factory=tuple)
    status: Optional[str] = None
    query: Optional[str] = None
    sort: str = DEFAULT_SORT
    page: int = 1
    limit: int = 20


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _contains_pattern(value: str) -> str:
    """ILIKE pattern matching 'value' literally anywhere in the column"""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _clean_features(features: Optional[Iterable[str]]) -> Tuple[str, ...]:
    seen: List[str] = []
    for feature in features or []:
        tag = _clean(feature)
        if tag and tag not in seen:
            seen.append(tag)
    return tuple(seen)


def normalize_filters(
    filters: Union[SearchFilters, Dict[str, Any], None] = None,
    default_limit: Optional[int] = None,
    max_limit: Optional[int] = None,
) -> NormalizedFilters:
    """
    Apply defaults and resolve advisory combinations.

    Filters are advisory: inconsistent combinations are dropped rather than
    rejected (band without budget type, radius without origin, unknown sort).
    """
    if filters is None:
        filters = SearchFilters()
    elif isinstance(filters, dict):
        filters = SearchFilters.model_validate(filters)

    default_limit = default_limit or settings.search_default_limit
    max_limit = max_limit or settings.search_max_limit

    origin = None
    if filters.location is not None:
        origin = (filters.location.lat, filters.location.lng)

    radius_m = filters.distance_radius
    if origin is None or radius_m is None or radius_m <= 0:
        radius_m = None

    budget_type = filters.budget_type
    budget_band = _clean(filters.budget_band) if budget_type else None

    sort = (filters.sort or DEFAULT_SORT).strip().lower()
    if sort not in SORT_KEYS:
        sort = DEFAULT_SORT

    page = filters.page if filters.page is not None else 1
    limit = filters.limit if filters.limit is not None else default_limit

    return NormalizedFilters(
        origin=origin,
        radius_m=radius_m,
        prefecture=_clean(filters.prefecture),
        genre_parent=_clean(filters.genre_parent),
        genre_child=_clean(filters.genre_child),
        budget_type=budget_type,
        budget_band=budget_band,
        features=_clean_features(filters.features),
        status=filters.status,
        query=_clean(filters.query),
        sort=sort,
        page=max(1, page),
        limit=min(max(1, limit), max_limit),
    )


def compose_predicates(user_id: int, nf: NormalizedFilters) -> List[Any]:
    """Conjunction of SQL conditions, always scoped to the owner."""
    conditions: List[Any] = [Place.user_id == user_id]

    if nf.genre_parent:
        conditions.append(Place.genre_parent == nf.genre_parent)
    if nf.genre_child:
        conditions.append(Place.genre_child == nf.genre_child)
    if nf.prefecture:
        conditions.append(Place.prefecture == nf.prefecture)

    if nf.budget_type and nf.budget_band:
        column = Place.budget_lunch if nf.budget_type == "lunch" else Place.budget_dinner
        conditions.append(column.ilike(_contains_pattern(nf.budget_band), escape="\\"))

    if nf.status:
        conditions.append(Place.status == nf.status)

    if nf.query:
        term = _contains_pattern(nf.query)
        conditions.append(or_(
            Place.name.ilike(term, escape="\\"),
            Place.genre.ilike(term, escape="\\"),
            Place.summary.ilike(term, escape="\\"),
        ))

    # BBOX is only a prefilter: evaluate_distances re-checks the exact radius.
    # Rows without coordinates must survive it; a box crossing the antimeridian
    # keeps the latitude band only.
    if nf.origin is not None and nf.radius_m is not None:
        lat_min, lat_max, lng_min, lng_max = geo_bbox(nf.origin[0], nf.origin[1], nf.radius_m)
        box = [Place.latitude.between(lat_min, lat_max)]
        if lng_min >= -180.0 and lng_max <= 180.0:
            box.append(Place.longitude.between(lng_min, lng_max))
        conditions.append(or_(
            Place.latitude.is_(None),
            Place.longitude.is_(None),
            and_(*box),
        ))

    return conditions


def matches_features(place_features: Optional[Sequence[str]], required: Sequence[str]) -> bool:
    """Contains-all: the place's tags must be a superset of the requested tags."""
    if not required:
        return True
    return set(required).issubset(set(place_features or []))


def evaluate_distances(places: Iterable[Place], nf: NormalizedFilters) -> List[Candidate]:
    """Attach distances and drop known-distance places outside the radius."""
    candidates = []
    for place in places:
        distance_km = None
        if nf.origin is not None and place.has_coordinates():
            distance_km = distance_from(nf.origin, place.latitude, place.longitude)
        if not within_radius(distance_km, nf.radius_m):
            continue
        candidates.append(Candidate(place=place, distance_km=distance_km))
    return candidates


def to_search_item(candidate: Candidate, with_distance: bool) -> Dict[str, Any]:
    """Shape a ranked candidate into the search result payload"""
    place = candidate.place
    item = {
        "id": place.id,
        "name": place.name,
        "address": place.address,
        "lat": place.latitude,
        "lng": place.longitude,
        "genre": place.genre,
        "genreParent": place.genre_parent,
        "genreChild": place.genre_child,
        "prefecture": place.prefecture,
        "features": place.feature_list,
        "summary": place.summary,
        "rating": place.rating,
        "reviewCount": place.review_count,
        "budgetLunch": place.budget_lunch,
        "budgetDinner": place.budget_dinner,
        "googleMapsUrl": place.google_maps_url or build_directions_url(
            lat=place.latitude, lng=place.longitude,
            address=place.address, place_id=place.google_place_id,
        ),
        "status": place.status,
        "userRating": place.user_rating,
        "distance": None,
    }
    if with_distance and candidate.distance_km is not None:
        item["distance"] = round(candidate.distance_km, 3)
    return item


class PlaceSearchService:
    """Distance-aware filtered search over one user's saved places"""

    def __init__(self, db: Session):
        self.db = db

    def fetch_candidates(self, user_id: int, nf: NormalizedFilters) -> List[Place]:
        conditions = compose_predicates(user_id, nf)
        places = self.db.query(Place).filter(*conditions).all()
        if nf.features:
            places = [p for p in places if matches_features(p.features, nf.features)]
        return places

    def search(self, user_id: int, filters: Union[SearchFilters, Dict[str, Any], None] = None) -> Dict[str, Any]:
        """search(filters) -> {places, total, page, limit, hasMore}"""
        start_time = time.time()
        nf = normalize_filters(filters)

        places = self.fetch_candidates(user_id, nf)
        candidates = evaluate_distances(places, nf)
        ranked = rank(candidates, nf.sort)
        page = paginate(ranked, nf.page, nf.limit)

        processing_time = round((time.time() - start_time) * 1000, 2)
        logger.info(
            "search user=%s sort=%s page=%s total=%s took=%sms",
            user_id, nf.sort, nf.page, page.total, processing_time,
        )

        with_distance = nf.origin is not None
        return {
            "places": [to_search_item(c, with_distance) for c in page.items],
            "total": page.total,
            "page": page.page,
            "limit": page.limit,
            "hasMore": page.has_more,
        }


def create_search_service(db: Session) -> PlaceSearchService:
    """Create search service instance"""
    return PlaceSearchService(db)
