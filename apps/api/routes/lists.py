import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from apps.api.deps import require_user
from apps.api.schemas.list import AddPlaceRequest, ListCreate, ListDetail, ListResponse, ListUpdate
from apps.api.schemas.place import DeleteResponse, PlaceResponse
from apps.core.db import get_db
from apps.places.models import PlaceList
from apps.places.services.lists import ListService
from apps.places.services.places import PlaceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lists", tags=["lists"])


def _get_list_or_404(service: ListService, user_id: int, list_id: int) -> PlaceList:
    place_list = service.get(user_id, list_id)
    if place_list is None:
        raise HTTPException(status_code=404, detail="List not found")
    return place_list


def _list_detail(service: ListService, place_list: PlaceList) -> ListDetail:
    memberships = service.memberships(place_list)
    return ListDetail(
        id=place_list.id,
        name=place_list.name,
        description=place_list.description,
        color=place_list.color,
        icon=place_list.icon,
        place_count=len(memberships),
        created_at=place_list.created_at,
        updated_at=place_list.updated_at,
        places=[
            {
                "place": PlaceResponse.model_validate(m.place),
                "note": m.note,
                "added_at": m.added_at,
            }
            for m in memberships
        ],
    )


@router.get("", response_model=List[ListResponse])
def get_lists(user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    """Caller's lists, newest first, with place counts"""
    return [
        ListResponse.model_validate(place_list).model_copy(update={"place_count": count})
        for place_list, count in ListService(db).list_for_user(user_id)
    ]


@router.post("", response_model=ListResponse, status_code=201)
def create_list(payload: ListCreate, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    return ListService(db).create(user_id, payload.model_dump(exclude_none=True))


@router.get("/{list_id}", response_model=ListDetail)
def get_list(list_id: int, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    service = ListService(db)
    return _list_detail(service, _get_list_or_404(service, user_id, list_id))


@router.patch("/{list_id}", response_model=ListDetail)
def update_list(
    list_id: int,
    payload: ListUpdate,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    service = ListService(db)
    place_list = service.update(user_id, list_id, payload.model_dump(exclude_unset=True))
    if place_list is None:
        raise HTTPException(status_code=404, detail="List not found")
    return _list_detail(service, place_list)


@router.delete("/{list_id}", response_model=DeleteResponse)
def delete_list(list_id: int, user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    if not ListService(db).delete(user_id, list_id):
        raise HTTPException(status_code=404, detail="List not found")
    return {"success": True}


@router.post("/{list_id}/places", response_model=ListDetail, status_code=201)
def add_place_to_list(
    list_id: int,
    payload: AddPlaceRequest,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    service = ListService(db)
    place_list = _get_list_or_404(service, user_id, list_id)
    place = PlaceService(db).get(user_id, payload.place_id)
    if place is None:
        raise HTTPException(status_code=404, detail="Place not found")
    service.add_place(place_list, place, payload.note)
    return _list_detail(service, place_list)


@router.delete("/{list_id}/places/{place_id}", response_model=DeleteResponse)
def remove_place_from_list(
    list_id: int,
    place_id: int,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    service = ListService(db)
    place_list = _get_list_or_404(service, user_id, list_id)
    if not service.remove_place(place_list, place_id):
        raise HTTPException(status_code=404, detail="Place is not in this list")
    return {"success": True}
