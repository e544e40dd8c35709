import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.api.deps import require_user
from apps.core.db import get_db
from apps.places.schemas.search import SearchFilters, SearchResponse
from apps.places.services.search import create_search_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search/filter", response_model=SearchResponse)
def search_filter(
    filters: SearchFilters,
    user_id: int = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Filtered search over the caller's places.

    All filters are optional; with an origin, results carry the distance in km
    and a radius drops places that are known to be farther away.
    """
    return create_search_service(db).search(user_id, filters)
