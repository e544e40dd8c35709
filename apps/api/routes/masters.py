"""Read-only master data backing the search filter UI."""

from fastapi import APIRouter

from apps.places.masters import (
    BUDGET_BANDS,
    CHILD_GENRES,
    DISTANCE_OPTIONS,
    FEATURE_OPTIONS,
    PARENT_GENRES,
    PREFECTURES,
    SORT_OPTIONS,
)

router = APIRouter(prefix="/masters", tags=["masters"])


@router.get("/genres")
def get_genres() -> dict:
    return {"parents": PARENT_GENRES, "children": CHILD_GENRES}


@router.get("/budgets")
def get_budgets() -> dict:
    return BUDGET_BANDS


@router.get("/distances")
def get_distances() -> list:
    return DISTANCE_OPTIONS


@router.get("/features")
def get_features() -> dict:
    return FEATURE_OPTIONS


@router.get("/sort-options")
def get_sort_options() -> list:
    return SORT_OPTIONS


@router.get("/prefectures")
def get_prefectures() -> list:
    return PREFECTURES
