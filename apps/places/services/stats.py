#!/usr/bin/env python3
"""Per-user statistics over saved places and lists"""

import logging
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from apps.places.models import Place, PlaceList, PlaceStatus

logger = logging.getLogger(__name__)

RATING_BUCKETS = ("1", "2", "3", "4", "5")
VISIT_HISTORY_LIMIT = 10


class StatsService:
    def __init__(self, db: Session):
        self.db = db

    def stats(self, user_id: int) -> Dict[str, int]:
        status_counts = dict(
            self.db.query(Place.status, func.count(Place.id))
            .filter(Place.user_id == user_id)
            .group_by(Place.status)
            .all()
        )
        total_lists = self.db.query(func.count(PlaceList.id)).filter(PlaceList.user_id == user_id).scalar()
        return {
            "totalPlaces": int(sum(status_counts.values())),
            "totalLists": int(total_lists or 0),
            "visitedCount": int(status_counts.get(PlaceStatus.VISITED.value, 0)),
            "wantToGoCount": int(status_counts.get(PlaceStatus.WANT_TO_GO.value, 0)),
        }

    def detailed_stats(self, user_id: int) -> Dict[str, Any]:
        places = self.db.query(Place).filter(Place.user_id == user_id).all()

        distribution = {bucket: 0 for bucket in RATING_BUCKETS}
        rated = [p.user_rating for p in places if p.user_rating is not None]
        for value in rated:
            key = str(value)
            if key in distribution:
                distribution[key] += 1

        return {
            "ratingDistribution": [{"range": k, "count": v} for k, v in distribution.items()],
            "genreStats": self._genre_stats(places),
            "visitHistory": self._visit_history(places),
            "avgRating": round(sum(rated) / len(rated), 1) if rated else None,
            "ratedCount": len(rated),
        }

    def _genre_stats(self, places: List[Place]) -> List[Dict[str, Any]]:
        groups: Dict[str, List[Place]] = {}
        for place in places:
            genre = place.genre_parent or place.genre
            if not genre:
                continue
            groups.setdefault(genre, []).append(place)

        out = []
        for genre, members in groups.items():
            ratings = [p.user_rating for p in members if p.user_rating is not None]
            out.append({
                "genre": genre,
                "count": len(members),
                "avgRating": round(sum(ratings) / len(ratings), 1) if ratings else None,
            })
        out.sort(key=lambda g: (-g["count"], g["genre"]))
        return out

    def _visit_history(self, places: List[Place]) -> List[Dict[str, Any]]:
        visited = [
            p for p in places
            if p.status == PlaceStatus.VISITED.value and p.visited_at is not None
        ]
        visited.sort(key=lambda p: (p.visited_at, p.id), reverse=True)
        return [
            {
                "id": p.id,
                "name": p.name,
                "genre": p.genre_parent or p.genre,
                "visitedAt": p.visited_at.isoformat(),
                "userRating": p.user_rating,
            }
            for p in visited[:VISIT_HISTORY_LIMIT]
        ]
