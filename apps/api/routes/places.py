import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from apps.api.deps import require_user
from apps.api.schemas.list import ListResponse
from apps.api.schemas.place import (
    DeleteResponse,
    PlaceCreate,
    PlaceRatingUpdate,
    PlaceResponse,
    PlaceStatusUpdate,
    PlaceUpdate,
)
from apps.core.db import get_db
from apps.places.schemas.search import PlaceStatusValue, SearchFilters, SearchResponse
from apps.places.services.places import PlaceService
from apps.places.services.search import create_search_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_place_or_404(service: PlaceService, user_id: int, place_id: int):
    place = service.get(user_id, place_id)
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return place


@router.get("/places", response_model=List[PlaceResponse])
def get_places(user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    """Caller's places, newest first"""
    return PlaceService(db).list_for_user(user_id)


@router.post("/places", response_model=PlaceResponse, status_code=201)
def create_place(
    payload: PlaceCreate,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    return PlaceService(db).create(user_id, payload.model_dump(exclude_none=True))


@router.get("/places/search", response_model=SearchResponse)
def search_places(
    q: Optional[str] = Query(None, max_length=200, description="Search query"),
    features: Optional[List[str]] = Query(None, description="Required feature tags"),
    status: Optional[PlaceStatusValue] = Query(None),
    sort: Optional[str] = Query(None, description="recommended | distance | rating | reviews | new"),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Simple text search over the same pipeline as /search/filter"""
    filters = SearchFilters(query=q, features=features, status=status, sort=sort, page=page, limit=limit)
    return create_search_service(db).search(user_id, filters)


@router.get("/places/{place_id}", response_model=PlaceResponse)
def get_place(place_id: int, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    return _get_place_or_404(PlaceService(db), user_id, place_id)


@router.patch("/places/{place_id}", response_model=PlaceResponse)
def update_place(
    place_id: int,
    payload: PlaceUpdate,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    place = PlaceService(db).update(user_id, place_id, payload.model_dump(exclude_unset=True))
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return place


@router.delete("/places/{place_id}", response_model=DeleteResponse)
def delete_place(place_id: int, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    if not PlaceService(db).delete(user_id, place_id):
        raise HTTPException(status_code=404, detail="Place not found")
    return {"success": True}


@router.put("/places/{place_id}/status", response_model=PlaceResponse)
def update_place_status(
    place_id: int,
    payload: PlaceStatusUpdate,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    place = PlaceService(db).update_status(user_id, place_id, payload.status)
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return place


@router.put("/places/{place_id}/rating", response_model=PlaceResponse)
def update_place_rating(
    place_id: int,
    payload: PlaceRatingUpdate,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    service = PlaceService(db)
    if "user_note" in payload.model_fields_set:
        place = service.update_rating(user_id, place_id, payload.user_rating, payload.user_note)
    else:
        place = service.update_rating(user_id, place_id, payload.user_rating)
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return place


@router.get("/places/{place_id}/lists", response_model=List[ListResponse])
def get_place_lists(place_id: int, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    """Lists that contain the place"""
    lists = PlaceService(db).lists_for_place(user_id, place_id)
    if lists is None:
        raise HTTPException(status_code=404, detail="Place not found")
    return [
        ListResponse.model_validate(place_list).model_copy(update={"place_count": len(place_list.memberships)})
        for place_list in lists
    ]
