#!/usr/bin/env python3
"""User-defined place lists and their memberships"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from apps.places.models import ListPlace, Place, PlaceList

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "color", "icon")


class ListService:
    """List repository for one request's session"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: int, data: Dict[str, Any]) -> PlaceList:
        place_list = PlaceList(user_id=user_id, **data)
        self.db.add(place_list)
        self.db.commit()
        self.db.refresh(place_list)
        logger.info("Created list %s for user %s", place_list.id, user_id)
        return place_list

    def list_for_user(self, user_id: int) -> List[Tuple[PlaceList, int]]:
        """Lists newest first, each with its place count"""
        counts = (
            self.db.query(ListPlace.list_id, func.count(ListPlace.id).label("place_count"))
            .group_by(ListPlace.list_id)
            .subquery()
        )
        rows = (
            self.db.query(PlaceList, func.coalesce(counts.c.place_count, 0))
            .outerjoin(counts, counts.c.list_id == PlaceList.id)
            .filter(PlaceList.user_id == user_id)
            .order_by(PlaceList.created_at.desc(), PlaceList.id.desc())
            .all()
        )
        return [(place_list, int(count)) for place_list, count in rows]

    def get(self, user_id: int, list_id: int) -> Optional[PlaceList]:
        """List by id, or None when missing or owned by someone else"""
        return (
            self.db.query(PlaceList)
            .filter(PlaceList.id == list_id, PlaceList.user_id == user_id)
            .first()
        )

    def memberships(self, place_list: PlaceList) -> List[ListPlace]:
        """Memberships in order of addition"""
        return (
            self.db.query(ListPlace)
            .join(Place, Place.id == ListPlace.place_id)
            .filter(ListPlace.list_id == place_list.id, Place.user_id == place_list.user_id)
            .order_by(ListPlace.added_at, ListPlace.id)
            .all()
        )

    def update(self, user_id: int, list_id: int, data: Dict[str, Any]) -> Optional[PlaceList]:
        place_list = self.get(user_id, list_id)
        if place_list is None:
            return None
        for key, value in data.items():
            if key in EDITABLE_FIELDS:
                setattr(place_list, key, value)
        self.db.commit()
        self.db.refresh(place_list)
        return place_list

    def delete(self, user_id: int, list_id: int) -> bool:
        place_list = self.get(user_id, list_id)
        if place_list is None:
            return False
        self.db.query(ListPlace).filter(ListPlace.list_id == place_list.id).delete(synchronize_session=False)
        self.db.delete(place_list)
        self.db.commit()
        logger.info("Deleted list %s for user %s", list_id, user_id)
        return True

    def add_place(self, place_list: PlaceList, place: Place, note: Optional[str] = None) -> ListPlace:
        """Idempotent: an existing membership is returned unchanged."""
        existing = (
            self.db.query(ListPlace)
            .filter(ListPlace.list_id == place_list.id, ListPlace.place_id == place.id)
            .first()
        )
        if existing is not None:
            return existing
        membership = ListPlace(list_id=place_list.id, place_id=place.id, note=note)
        self.db.add(membership)
        self.db.commit()
        self.db.refresh(membership)
        return membership

    def remove_place(self, place_list: PlaceList, place_id: int) -> bool:
        removed = (
            self.db.query(ListPlace)
            .filter(ListPlace.list_id == place_list.id, ListPlace.place_id == place_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return removed > 0
