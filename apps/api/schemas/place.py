from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from apps.places.schemas.search import CamelModel, PlaceStatusValue


class PlaceBase(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    genre: Optional[str] = Field(None, max_length=100)
    genre_parent: Optional[str] = Field(None, max_length=50)
    genre_child: Optional[str] = Field(None, max_length=50)
    prefecture: Optional[str] = Field(None, max_length=50)
    features: Optional[List[str]] = None
    summary: Optional[str] = None
    budget_lunch: Optional[str] = Field(None, max_length=50)
    budget_dinner: Optional[str] = Field(None, max_length=50)
    phone_number: Optional[str] = Field(None, max_length=50)
    photo_url: Optional[str] = None


class PlaceCreate(PlaceBase):
    name: str = Field(..., min_length=1, max_length=255)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    google_place_id: Optional[str] = Field(None, max_length=255)
    source: Optional[str] = Field(None, max_length=50)
    google_maps_url: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    review_count: Optional[int] = Field(None, ge=0)
    price_level: Optional[int] = Field(None, ge=0, le=4)


class PlaceUpdate(PlaceBase):
    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be null")
        return v


class PlaceStatusUpdate(CamelModel):
    status: PlaceStatusValue


class PlaceRatingUpdate(CamelModel):
    user_rating: Optional[int] = Field(..., ge=1, le=5, description="1-5 stars, null clears")
    user_note: Optional[str] = None


class PlaceResponse(CamelModel):
    id: int
    name: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    genre: Optional[str] = None
    genre_parent: Optional[str] = None
    genre_child: Optional[str] = None
    prefecture: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    source: Optional[str] = None
    google_place_id: Optional[str] = None
    google_maps_url: Optional[str] = None
    phone_number: Optional[str] = None
    photo_url: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    price_level: Optional[int] = None
    budget_lunch: Optional[str] = None
    budget_dinner: Optional[str] = None
    status: PlaceStatusValue = "none"
    user_rating: Optional[int] = None
    user_note: Optional[str] = None
    visited_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("features", mode="before")
    @classmethod
    def _features_list(cls, v):
        return list(v or [])


class DeleteResponse(CamelModel):
    success: bool = True
