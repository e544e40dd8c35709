#!/usr/bin/env python3
"""CRUD for saved places, always scoped to the owning user"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from apps.places.models import ListPlace, Place, PlaceList, PlaceStatus

logger = logging.getLogger(__name__)

# Fields an explicit edit may touch; user state has its own endpoints
EDITABLE_FIELDS = (
    "name", "address", "genre", "genre_parent", "genre_child", "prefecture",
    "features", "summary", "budget_lunch", "budget_dinner", "phone_number", "photo_url",
)

_UNSET = object()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class PlaceService:
    """Place repository for one request's session"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, data: Dict[str, Any]) -> Place:
        place = Place(user_id=user_id, **data)
        if place.features is not None:
            place.features = list(dict.fromkeys(place.features))
        self.db.add(place)
        self.db.commit()
        self.db.refresh(place)
        logger.info("Created place %s for user %s", place.id, user_id)
        return place

    def list_for_user(self, user_id: int) -> List[Place]:
        return (
            self.db.query(Place)
            .filter(Place.user_id == user_id)
            .order_by(Place.created_at.desc(), Place.id.desc())
            .all()
        )

    def get(self, user_id: int, place_id: int) -> Optional[Place]:
        """Place by id, or None when missing or owned by someone else"""
        return (
            self.db.query(Place)
            .filter(Place.id == place_id, Place.user_id == user_id)
            .first()
        )

    def update(self, user_id: int, place_id: int, data: Dict[str, Any]) -> Optional[Place]:
        place = self.get(user_id, place_id)
        if place is None:
            return None
        for key, value in data.items():
            if key not in EDITABLE_FIELDS:
                continue
            if key == "features" and value is not None:
                value = list(dict.fromkeys(value))
            setattr(place, key, value)
        self.db.commit()
        self.db.refresh(place)
        return place

    def delete(self, user_id: int, place_id: int) -> bool:
        """Delete a place together with its list memberships."""
        place = self.get(user_id, place_id)
        if place is None:
            return False
        self.db.query(ListPlace).filter(ListPlace.place_id == place.id).delete(synchronize_session=False)
        self.db.delete(place)
        self.db.commit()
        logger.info("Deleted place %s for user %s", place_id, user_id)
        return True

    def update_status(self, user_id: int, place_id: int, status: str) -> Optional[Place]:
        place = self.get(user_id, place_id)
        if place is None:
            return None
        place.status = PlaceStatus(status).value
        if place.status == PlaceStatus.VISITED.value and place.visited_at is None:
            place.visited_at = _utcnow()
        self.db.commit()
        self.db.refresh(place)
        return place

    def update_rating(
        self,
        user_id: int,
        place_id: int,
        user_rating: Optional[int],
        user_note: Any = _UNSET,
    ) -> Optional[Place]:
        """Set or clear (None) the 1-5 user rating; the note is left alone unless given."""
        place = self.get(user_id, place_id)
        if place is None:
            return None
        place.user_rating = user_rating
        if user_note is not _UNSET:
            place.user_note = user_note
        self.db.commit()
        self.db.refresh(place)
        return place

    def lists_for_place(self, user_id: int, place_id: int) -> Optional[List[PlaceList]]:
        place = self.get(user_id, place_id)
        if place is None:
            return None
        return (
            self.db.query(PlaceList)
            .join(ListPlace, ListPlace.list_id == PlaceList.id)
            .filter(ListPlace.place_id == place.id, PlaceList.user_id == user_id)
            .order_by(PlaceList.id)
            .all()
        )
