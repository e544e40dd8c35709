import math
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Text, Numeric, DateTime, JSON, CheckConstraint,
    ForeignKey, UniqueConstraint,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from apps.core.db import Base


class PlaceStatus(Enum):
    """User's relationship to a saved place"""
    NONE = "none"
    WANT_TO_GO = "want_to_go"
    VISITED = "visited"


class Place(Base):
    __tablename__ = "places"
    __table_args__ = (
        CheckConstraint("user_rating IS NULL OR (user_rating >= 1 AND user_rating <= 5)", name="ck_places_user_rating"),
        CheckConstraint("status IN ('none', 'want_to_go', 'visited')", name="ck_places_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    # Source
    google_place_id = Column(String(255), nullable=True)
    source = Column(String(50), nullable=True)
    google_maps_url = Column(Text, nullable=True)

    # Identity and location
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    latitude = Column(Numeric(10, 7, asdecimal=False), nullable=True)
    longitude = Column(Numeric(10, 7, asdecimal=False), nullable=True)
    prefecture = Column(String(50), nullable=True, index=True)
    phone_number = Column(String(50), nullable=True)
    photo_url = Column(Text, nullable=True)

    # Set once by the summarizer, changed only by an explicit edit
    genre = Column(String(100), nullable=True)
    genre_parent = Column(String(50), nullable=True, index=True)
    genre_child = Column(String(50), nullable=True)
    features = Column(JSON, nullable=True)  # ordered list of tag ids
    summary = Column(Text, nullable=True)

    # Provider data
    rating = Column(Numeric(2, 1, asdecimal=False), nullable=True)
    review_count = Column(Integer, nullable=True)
    price_level = Column(Integer, nullable=True)
    budget_lunch = Column(String(50), nullable=True)
    budget_dinner = Column(String(50), nullable=True)

    # User state
    status = Column(String(20), nullable=False, default=PlaceStatus.NONE.value, server_default=PlaceStatus.NONE.value)
    user_rating = Column(Integer, nullable=True)  # 1-5
    user_note = Column(Text, nullable=True)
    visited_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    memberships = relationship("ListPlace", back_populates="place", passive_deletes="all")

    def has_coordinates(self) -> bool:
        """Coordinates are usable for distance math (present, finite)"""
        if self.latitude is None or self.longitude is None:
            return False
        return not (math.isnan(self.latitude) or math.isnan(self.longitude) or
                    math.isinf(self.latitude) or math.isinf(self.longitude))

    @property
    def feature_list(self) -> list:
        return list(self.features or [])


class PlaceList(Base):
    """User-defined named collection of places"""
    __tablename__ = "place_lists"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(20), nullable=True)
    icon = Column(String(50), nullable=True)
    created_at = Column(DateTime, nullable=False, default=func.now())
    updated_at = Column(DateTime, nullable=False, default=func.now(), onupdate=func.now())

    memberships = relationship(
        "ListPlace",
        back_populates="place_list",
        passive_deletes="all",
        order_by="ListPlace.id",
    )


class ListPlace(Base):
    """Membership of a place in a list"""
    __tablename__ = "list_places"
    __table_args__ = (
        UniqueConstraint("list_id", "place_id", name="uq_list_places_list_place"),
    )

    id = Column(Integer, primary_key=True, index=True)
    list_id = Column(Integer, ForeignKey("place_lists.id", ondelete="CASCADE"), nullable=False, index=True)
    place_id = Column(Integer, ForeignKey("places.id", ondelete="CASCADE"), nullable=False, index=True)
    note = Column(Text, nullable=True)
    added_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    place_list = relationship("PlaceList", back_populates="memberships")
    place = relationship("Place", back_populates="memberships")
