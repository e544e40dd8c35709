#!/usr/bin/env python3
"""Pydantic schemas for filtered place search"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PlaceStatusValue = Literal["none", "want_to_go", "visited"]
BudgetType = Literal["lunch", "dinner"]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class GeoPoint(BaseModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")


class SearchFilters(CamelModel):
    """Advisory search filters; every field is optional"""
    location: Optional[GeoPoint] = Field(None, description="Origin for distance computation")
    distance_radius: Optional[float] = Field(None, description="Search radius in meters")
    prefecture: Optional[str] = Field(None, max_length=50)
    genre_parent: Optional[str] = Field(None, max_length=50)
    genre_child: Optional[str] = Field(None, max_length=50)
    budget_type: Optional[BudgetType] = None
    budget_band: Optional[str] = Field(None, max_length=50)
    features: Optional[List[str]] = None
    status: Optional[PlaceStatusValue] = None
    query: Optional[str] = Field(None, max_length=200, description="Free-text query")
    sort: Optional[str] = Field(None, description="recommended | distance | rating | reviews | new")
    page: Optional[int] = None
    limit: Optional[int] = None


class PlaceSearchItem(CamelModel):
    """Individual search result"""
    id: int
    name: str
    address: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    genre: Optional[str] = None
    genre_parent: Optional[str] = None
    genre_child: Optional[str] = None
    prefecture: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    budget_lunch: Optional[str] = None
    budget_dinner: Optional[str] = None
    google_maps_url: Optional[str] = None
    status: PlaceStatusValue = "none"
    user_rating: Optional[int] = None
    distance: Optional[float] = Field(None, description="Kilometers from the origin")


class SearchResponse(CamelModel):
    """Response schema for search endpoint"""
    places: List[PlaceSearchItem]
    total: int
    page: int
    limit: int
    has_more: bool
