from pydantic import Field
from typing import List, Literal, Optional

from apps.places.schemas.search import CamelModel


class SummaryRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    genre: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    price_level: Optional[int] = Field(None, ge=0, le=4)
    reviews: Optional[List[str]] = None


class SummaryResponse(CamelModel):
    summary: str = ""
    features: List[str] = Field(default_factory=list)
    genre: str = ""


class ParseQueryRequest(CamelModel):
    query: str = Field(..., min_length=1, max_length=200)


class ParseQueryResponse(CamelModel):
    keywords: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    genre: Optional[str] = None
    price_range: Optional[Literal["high", "medium", "low"]] = None
