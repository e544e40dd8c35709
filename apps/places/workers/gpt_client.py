#!/usr/bin/env python3
"""GPT client for place summaries and natural-language search parsing"""

import json
import logging
from typing import Any, Dict, List, Optional

import openai

from apps.places.masters import SUMMARY_FEATURES

logger = logging.getLogger(__name__)

PRICE_RANGES = ("high", "medium", "low")


class GPTClient:
    """Client for the OpenAI chat completions API"""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", timeout: int = 30, client: Any = None):
        self.client = client or openai.OpenAI(api_key=api_key, timeout=timeout)
        self.model = model
        self.timeout = timeout

    def _complete_json(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            response_format={"type": "json_object"},
            temperature=0.3,
            max_tokens=600,
        )
        content = response.choices[0].message.content
        if not content:
            raise ValueError("empty completion")
        result = json.loads(content)
        if not isinstance(result, dict):
            raise ValueError(f"expected a JSON object, got {type(result).__name__}")
        return result

    def generate_summary(
        self,
        name: str,
        address: Optional[str] = None,
        genre: Optional[str] = None,
        rating: Optional[float] = None,
        price_level: Optional[int] = None,
        reviews: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """1-2 line summary, feature tags and genre for a restaurant.

        Never raises: LLM or parsing failures give an empty summary and keep
        the caller's genre.
        """
        fallback = {"summary": "", "features": [], "genre": genre or ""}
        lines = [
            "Summarize this restaurant in 1-2 short lines and pick matching feature tags.",
            "",
            f"Name: {name}",
            f"Address: {address or 'unknown'}",
            f"Genre: {genre or 'unknown'}",
            f"Rating: {f'{rating}/5' if rating is not None else 'unknown'}",
            f"Price: {'¥' * price_level if price_level else 'unknown'}",
        ]
        if reviews:
            lines.append(f"Review excerpts: {' / '.join(reviews[:3])}")
        lines += [
            "",
            "Return ONLY JSON with keys:",
            '  "summary": atmosphere and highlights in 1-2 lines,',
            f'  "features": subset of {json.dumps(SUMMARY_FEATURES)},',
            '  "genre": genre name such as "Italian".',
        ]
        try:
            result = self._complete_json(
                "You summarize restaurant information. Return strict JSON. No markdown.",
                "\n".join(lines),
            )
        except Exception as e:
            logger.error(f"GPT summary failed for {name!r}: {e}")
            return fallback

        features = result.get("features")
        return {
            "summary": result.get("summary") if isinstance(result.get("summary"), str) else "",
            "features": [f for f in features if isinstance(f, str)] if isinstance(features, list) else [],
            "genre": result.get("genre") if isinstance(result.get("genre"), str) else (genre or ""),
        }

    def parse_search_query(self, query: str) -> Dict[str, Any]:
        """Extract keywords, feature tags, genre and price range from free text."""
        fallback = {"keywords": [query], "features": [], "genre": None, "priceRange": None}
        user_prompt = (
            "Extract search conditions from this natural-language query.\n\n"
            f'Query: "{query}"\n\n'
            "Return ONLY JSON with keys:\n"
            '  "keywords": list of search keywords,\n'
            f'  "features": subset of {json.dumps(SUMMARY_FEATURES)},\n'
            '  "genre": genre name or null,\n'
            '  "priceRange": "high" | "medium" | "low" | null.'
        )
        try:
            result = self._complete_json(
                "You parse restaurant search queries. Return strict JSON. No markdown.",
                user_prompt,
            )
        except Exception as e:
            logger.error(f"GPT query parsing failed for {query!r}: {e}")
            return fallback

        keywords = result.get("keywords")
        features = result.get("features")
        price_range = result.get("priceRange")
        return {
            "keywords": [k for k in keywords if isinstance(k, str)] if isinstance(keywords, list) else [query],
            "features": [f for f in features if isinstance(f, str)] if isinstance(features, list) else [],
            "genre": result.get("genre") if isinstance(result.get("genre"), str) else None,
            "priceRange": price_range if price_range in PRICE_RANGES else None,
        }


def create_gpt_client(api_key: str, model: str = "gpt-4o-mini", timeout: int = 30) -> Optional[GPTClient]:
    """GPT client, or None when no API key is configured"""
    if not api_key:
        return None
    return GPTClient(api_key=api_key, model=model, timeout=timeout)
