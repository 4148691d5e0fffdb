"""Text parser base class, result type, and factory."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import FrostieConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedItemDetails:
    name: str
    quantity: int
    category: str
    size: str
    expiration_date: date
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "category": self.category,
            "size": self.size,
            "expirationDate": self.expiration_date.isoformat(),
            "tags": list(self.tags),
        }


class TextParser(ABC):
    """Abstract base for turning a free-text item description into details."""

    name: str = "parser"

    @abstractmethod
    async def parse(
        self,
        text: str,
        default_expiration_days: int = 30,
        today: date | None = None,
    ) -> ParsedItemDetails:
        """Parse one item description.

        Remote implementations may raise on transport or response errors;
        the regex parser never does.
        """
        ...


class FallbackTextParser(TextParser):
    """Try a primary parser and use the fallback if it raises."""

    def __init__(self, primary: TextParser, fallback: TextParser) -> None:
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    async def parse(
        self,
        text: str,
        default_expiration_days: int = 30,
        today: date | None = None,
    ) -> ParsedItemDetails:
        try:
            return await self.primary.parse(text, default_expiration_days, today)
        except Exception as e:
            logger.warning(
                "%s parser failed, falling back to %s: %s",
                self.primary.name, self.fallback.name, e,
            )
        return await self.fallback.parse(text, default_expiration_days, today)


def create_parser(config: FrostieConfig) -> TextParser:
    """Create a text parser based on configuration.

    Remote backends are wrapped so that any failure falls back to the
    deterministic regex parser.
    """
    from .regex import RegexTextParser

    backend_name = config.parser.backend
    remote: TextParser

    match backend_name:
        case "none":
            return RegexTextParser()
        case "edge":
            from .edge import EdgeFunctionTextParser

            remote = EdgeFunctionTextParser(
                url=config.parser.edge.url,
                api_key=config.parser.edge.api_key,
            )
        case "gemini":
            from .gemini import GeminiTextParser

            remote = GeminiTextParser(
                api_key=config.parser.gemini.api_key,
                model=config.parser.gemini.model,
            )
        case "claude":
            from .claude import ClaudeTextParser

            remote = ClaudeTextParser(
                api_key=config.parser.claude.api_key,
                model=config.parser.claude.model,
            )
        case _:
            raise ValueError(
                f"Unknown parser backend: {backend_name!r} "
                f"(choose from edge / gemini / claude / none)"
            )

    return FallbackTextParser(remote, RegexTextParser())
