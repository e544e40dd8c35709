import logging

from fastapi import APIRouter, Depends

from apps.api.deps import require_user
from apps.api.schemas.ai import ParseQueryRequest, ParseQueryResponse, SummaryRequest, SummaryResponse
from apps.core.config import settings
from apps.places.workers.gpt_client import create_gpt_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


def get_gpt_client():
    """GPT client for the configured key, or None when AI assist is disabled"""
    return create_gpt_client(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.openai_timeout_s,
    )


@router.post("/summary", response_model=SummaryResponse)
def generate_summary(
    payload: SummaryRequest,
    user_id: int = Depends(require_user),
    client=Depends(get_gpt_client),
):
    if client is None:
        logger.warning("AI summary requested but OPENAI_API_KEY is not set")
        return {"summary": "", "features": [], "genre": payload.genre or ""}
    return client.generate_summary(
        name=payload.name,
        address=payload.address,
        genre=payload.genre,
        rating=payload.rating,
        price_level=payload.price_level,
        reviews=payload.reviews,
    )


@router.post("/parse-query", response_model=ParseQueryResponse)
def parse_query(
    payload: ParseQueryRequest,
    user_id: int = Depends(require_user),
    client=Depends(get_gpt_client),
):
    if client is None:
        logger.warning("Query parsing requested but OPENAI_API_KEY is not set")
        return {"keywords": [payload.query], "features": [], "genre": None, "priceRange": None}
    return client.parse_search_query(payload.query)
