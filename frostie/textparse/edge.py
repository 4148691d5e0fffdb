"""Hosted edge-function parser backend."""

from __future__ import annotations

import logging
from datetime import date

from . import ParsedItemDetails, TextParser
from .payload import details_from_payload

logger = logging.getLogger(__name__)

FUNCTION_PATH = "/functions/v1/parse-item-text-with-ai"


class EdgeFunctionTextParser(TextParser):
    """Delegate parsing to the ``parse-item-text-with-ai`` edge function.

    The function answers ``{"parsedDetails": {...}, "source": "gemini"}``.
    No timeout or retry is applied here; the caller's fallback handles errors.
    """

    name = "edge"

    def __init__(self, url: str = "", api_key: str = "") -> None:
        self._url = url.rstrip("/")
        self._api_key = api_key

    async def parse(
        self,
        text: str,
        default_expiration_days: int = 30,
        today: date | None = None,
    ) -> ParsedItemDetails:
        if not self._url:
            raise ValueError(
                "Edge function URL is not configured. "
                "Set [parser.edge] url or the SUPABASE_URL environment variable."
            )

        try:
            import httpx
        except ImportError:
            raise ImportError(
                "httpx is required: pip install 'frostie[edge]'"
            ) from None

        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        async with httpx.AsyncClient(timeout=None) as client:
            response = await client.post(
                self._url + FUNCTION_PATH,
                headers=headers,
                json={
                    "inputText": text,
                    "defaultExpirationDays": default_expiration_days,
                },
            )
            response.raise_for_status()
            body = response.json()

        parsed = body.get("parsedDetails") if isinstance(body, dict) else None
        if not isinstance(parsed, dict):
            raise ValueError("Edge function response has no parsedDetails")

        logger.debug("Edge function (%s) returned %s", body.get("source"), parsed)
        return details_from_payload(parsed, default_expiration_days, today)
