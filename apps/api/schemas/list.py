from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from apps.places.schemas.search import CamelModel
from apps.api.schemas.place import PlaceResponse


class ListCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)


class ListUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be null")
        return v


class ListResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    place_count: int = 0
    created_at: datetime
    updated_at: datetime


class ListPlaceEntry(CamelModel):
    """A place as it appears inside a list"""
    place: PlaceResponse
    note: Optional[str] = None
    added_at: Optional[datetime] = None


class ListDetail(ListResponse):
    places: List[ListPlaceEntry] = Field(default_factory=list)


class AddPlaceRequest(CamelModel):
    place_id: int
    note: Optional[str] = None
