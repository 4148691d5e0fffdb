"""Gemini API parser backend."""

from __future__ import annotations

import logging
from datetime import date

from . import ParsedItemDetails, TextParser
from .payload import build_prompt, details_from_payload, extract_json_object

logger = logging.getLogger(__name__)


class GeminiTextParser(TextParser):
    """Parse item text with Google Gemini."""

    name = "gemini"

    def __init__(self, api_key: str = "", model: str = "gemini-2.0-flash") -> None:
        self._api_key = api_key
        self._model = model

    async def parse(
        self,
        text: str,
        default_expiration_days: int = 30,
        today: date | None = None,
    ) -> ParsedItemDetails:
        if not self._api_key:
            raise ValueError(
                "Gemini API key is not configured. "
                "Check the config file or the GEMINI_API_KEY environment variable."
            )

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError(
                "google-generativeai SDK is required: pip install 'frostie[gemini]'"
            ) from None

        today = today or date.today()

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self._model)

        response = await model.generate_content_async(
            build_prompt(text, default_expiration_days, today)
        )
        logger.debug("Gemini response: %s", response.text)

        payload = extract_json_object(response.text)
        return details_from_payload(payload, default_expiration_days, today)
