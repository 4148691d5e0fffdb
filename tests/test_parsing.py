"""Tests for parse_item_text and the parser factory."""

from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from frostie.config import load_config
from frostie.parsing import parse_item_text
from frostie.textparse import (
    FallbackTextParser,
    ParsedItemDetails,
    TextParser,
    create_parser,
)
from frostie.textparse.claude import ClaudeTextParser
from frostie.textparse.edge import EdgeFunctionTextParser
from frostie.textparse.gemini import GeminiTextParser
from frostie.textparse.regex import RegexTextParser

TODAY = date(2026, 1, 15)

AI_DETAILS = ParsedItemDetails(
    name="Salmon Fillets",
    quantity=2,
    category="Seafood",
    size="8oz",
    expiration_date=date(2026, 3, 1),
    tags=("fish", "dinner"),
)


class StubParser(TextParser):
    name = "stub"

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def parse(self, text, default_expiration_days=30, today=None):
        self.calls.append((text, default_expiration_days, today))
        if self.error is not None:
            raise self.error
        return self.result


class TestParseItemText:
    @pytest.mark.asyncio
    async def test_without_parser_uses_regex(self):
        result = await parse_item_text("salmon", 30, today=TODAY)
        assert result.name == "Salmon"
        assert result.expiration_date == TODAY + timedelta(days=76)

    @pytest.mark.asyncio
    async def test_remote_result_used(self):
        stub = StubParser(result=AI_DETAILS)
        result = await parse_item_text(
            "2 salmon fillets", 30, parser=stub, today=TODAY
        )
        assert result == AI_DETAILS
        assert stub.calls == [("2 salmon fillets", 30, TODAY)]

    @pytest.mark.asyncio
    async def test_remote_failure_falls_back(self):
        stub = StubParser(error=ConnectionError("unreachable"))
        result = await parse_item_text(
            "Beef good for 2 weeks", 30, parser=stub, today=TODAY
        )
        assert result.name == "Beef"
        assert result.expiration_date == TODAY + timedelta(days=14)

    @pytest.mark.asyncio
    async def test_unconfigured_edge_falls_back(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        parser = create_parser(load_config())
        result = await parse_item_text("xyzzycustomitem", 45, parser, TODAY)
        assert result.expiration_date == TODAY + timedelta(days=45)

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self):
        import asyncio

        results = await asyncio.gather(
            parse_item_text("salmon", today=TODAY),
            parse_item_text("2 8oz beef patties", today=TODAY),
        )
        assert results[0].name == "Salmon"
        assert results[1].name == "Beef Patties"
        assert results[1].quantity == 2


class TestFallbackTextParser:
    @pytest.mark.asyncio
    async def test_primary_success(self):
        fallback = StubParser(result=None)
        parser = FallbackTextParser(StubParser(result=AI_DETAILS), fallback)
        assert await parser.parse("x", 30, TODAY) == AI_DETAILS
        assert fallback.calls == []

    @pytest.mark.asyncio
    async def test_primary_failure(self):
        primary = StubParser(error=ValueError("bad json"))
        fallback = RegexTextParser()
        fallback.parse = AsyncMock(return_value=AI_DETAILS)
        parser = FallbackTextParser(primary, fallback)

        assert await parser.parse("x", 30, TODAY) == AI_DETAILS
        fallback.parse.assert_awaited_once_with("x", 30, TODAY)

    def test_name(self):
        parser = FallbackTextParser(StubParser(), RegexTextParser())
        assert parser.name == "stub+regex"


class TestCreateParser:
    def test_none_backend(self):
        config = load_config()
        config.parser.backend = "none"
        assert isinstance(create_parser(config), RegexTextParser)

    @pytest.mark.parametrize(
        "backend, cls",
        [
            ("edge", EdgeFunctionTextParser),
            ("gemini", GeminiTextParser),
            ("claude", ClaudeTextParser),
        ],
    )
    def test_remote_backends_wrapped(self, backend, cls):
        config = load_config()
        config.parser.backend = backend
        parser = create_parser(config)
        assert isinstance(parser, FallbackTextParser)
        assert isinstance(parser.primary, cls)
        assert isinstance(parser.fallback, RegexTextParser)

    def test_unknown_backend(self):
        config = load_config()
        config.parser.backend = "unknown"
        with pytest.raises(ValueError, match="Unknown parser backend"):
            create_parser(config)
