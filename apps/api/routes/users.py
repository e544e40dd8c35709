from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.api.deps import require_user
from apps.api.schemas.user import DetailedStats, UserResponse, UserStats
from apps.core.db import get_db
from apps.places.services.stats import StatsService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(user_id: int = Depends(require_user)):
    return {"id": user_id}


@router.get("/me/stats", response_model=UserStats)
def get_my_stats(user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    """Place, list, visited and want-to-go counts"""
    return StatsService(db).stats(user_id)


@router.get("/me/detailed-stats", response_model=DetailedStats)
def get_my_detailed_stats(user_id: int = Depends(require_user), db: Session = Depends(get_db)):
    """Rating distribution, per-genre counts and recent visits"""
    return StatsService(db).detailed_stats(user_id)
