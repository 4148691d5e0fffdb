"""Claude API parser backend."""

from __future__ import annotations

import logging
from datetime import date

from . import ParsedItemDetails, TextParser
from .payload import build_prompt, details_from_payload, extract_json_object

logger = logging.getLogger(__name__)


class ClaudeTextParser(TextParser):
    """Parse item text with Claude."""

    name = "claude"

    def __init__(
        self, api_key: str = "", model: str = "claude-sonnet-4-5-20250929"
    ) -> None:
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
                "Anthropic API key is not configured. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install 'frostie[claude]'"
            ) from None

        today = today or date.today()

        client = anthropic.AsyncAnthropic(api_key=self._api_key)
        response = await client.messages.create(
            model=self._model,
            max_tokens=1024,
            messages=[
                {
                    "role": "user",
                    "content": build_prompt(text, default_expiration_days, today),
                }
            ],
        )

        reply = response.content[0].text
        logger.debug("Claude response: %s", reply)
        return details_from_payload(
            extract_json_object(reply), default_expiration_days, today
        )
