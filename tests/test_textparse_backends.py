"""Tests for AI-backed parser backends (mocked API calls)."""

import json
import sys
from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from frostie.textparse.claude import ClaudeTextParser
from frostie.textparse.edge import FUNCTION_PATH, EdgeFunctionTextParser
from frostie.textparse.gemini import GeminiTextParser
from frostie.textparse.payload import (
    build_prompt,
    details_from_payload,
    extract_json_object,
)

TODAY = date(2026, 1, 15)

PAYLOAD = {
    "name": "Salmon Fillets",
    "quantity": 2,
    "category": "Seafood",
    "size": "8oz",
    "expirationDate": "2026-02-01",
    "tags": ["fish", "dinner"],
}


class TestDetailsFromPayload:
    def test_valid_payload(self):
        result = details_from_payload(PAYLOAD, 30, TODAY)
        assert result.name == "Salmon Fillets"
        assert result.quantity == 2
        assert result.category == "Seafood"
        assert result.size == "8oz"
        assert result.expiration_date == date(2026, 2, 1)
        assert result.tags == ("fish", "dinner")

    def test_past_date_replaced_with_foodkeeper(self):
        payload = {**PAYLOAD, "name": "Salmon", "expirationDate": "2020-01-01"}
        result = details_from_payload(payload, 30, TODAY)
        assert result.expiration_date == TODAY + timedelta(days=76)

    def test_today_is_not_accepted(self):
        payload = {**PAYLOAD, "name": "xyzzy", "expirationDate": "2026-01-15"}
        result = details_from_payload(payload, 30, TODAY)
        assert result.expiration_date == TODAY + timedelta(days=30)

    def test_datetime_string_accepted(self):
        payload = {**PAYLOAD, "expirationDate": "2026-02-01T00:00:00.000Z"}
        result = details_from_payload(payload, 30, TODAY)
        assert result.expiration_date == date(2026, 2, 1)

    def test_invalid_fields_get_defaults(self):
        payload = {
            "name": "Mystery",
            "quantity": "lots",
            "category": "Frozen Stuff",
            "expirationDate": "soon",
            "tags": "cold",
        }
        result = details_from_payload(payload, 20, TODAY)
        assert result.quantity == 1
        assert result.category == "Other"
        assert result.size == ""
        assert result.tags == ()
        assert result.expiration_date == TODAY + timedelta(days=20)

    def test_tags_stringified(self):
        result = details_from_payload({**PAYLOAD, "tags": [1, "a"]}, 30, TODAY)
        assert result.tags == ("1", "a")

    def test_missing_name(self):
        with pytest.raises(ValueError, match="no item name"):
            details_from_payload({**PAYLOAD, "name": ""}, 30, TODAY)


class TestExtractJsonObject:
    def test_plain(self):
        assert extract_json_object(json.dumps(PAYLOAD)) == PAYLOAD

    def test_with_fences_and_prose(self):
        text = "Here you go:\n```json\n" + json.dumps(PAYLOAD) + "\n```"
        assert extract_json_object(text) == PAYLOAD

    def test_no_object(self):
        with pytest.raises(ValueError):
            extract_json_object("I cannot help with that")

    def test_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            extract_json_object("{name: salmon}")


def test_build_prompt():
    prompt = build_prompt("2 salmon fillets", 30, TODAY)
    assert "2026-01-15" in prompt
    assert '"2 salmon fillets"' in prompt
    assert "Herbs & Seasonings" in prompt
    assert "30 days" in prompt


def _mock_httpx(body, status_error=None):
    response = MagicMock()
    response.json.return_value = body
    if status_error is not None:
        response.raise_for_status.side_effect = status_error

    client = MagicMock()
    client.post = AsyncMock(return_value=response)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)

    mock_httpx = MagicMock()
    mock_httpx.AsyncClient.return_value = client
    return mock_httpx, client


class TestEdgeFunctionTextParser:
    @pytest.mark.asyncio
    async def test_requires_url(self):
        parser = EdgeFunctionTextParser(url="")
        with pytest.raises(ValueError, match="URL"):
            await parser.parse("salmon")

    @pytest.mark.asyncio
    async def test_parse_mocked(self):
        mock_httpx, client = _mock_httpx(
            {"parsedDetails": PAYLOAD, "source": "gemini"}
        )

        with patch.dict(sys.modules, {"httpx": mock_httpx}):
            parser = EdgeFunctionTextParser(
                url="https://example.supabase.co/", api_key="anon-key"
            )
            result = await parser.parse("2 8oz salmon fillets", 30, TODAY)

        assert result.name == "Salmon Fillets"
        assert result.expiration_date == date(2026, 2, 1)

        args, kwargs = client.post.call_args
        assert args[0] == "https://example.supabase.co" + FUNCTION_PATH
        assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
        assert kwargs["json"] == {
            "inputText": "2 8oz salmon fillets",
            "defaultExpirationDays": 30,
        }

    @pytest.mark.asyncio
    async def test_missing_parsed_details(self):
        mock_httpx, _ = _mock_httpx({"error": "Internal server error"})

        with patch.dict(sys.modules, {"httpx": mock_httpx}):
            parser = EdgeFunctionTextParser(url="https://example.supabase.co")
            with pytest.raises(ValueError, match="parsedDetails"):
                await parser.parse("salmon", 30, TODAY)

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        mock_httpx, _ = _mock_httpx({}, status_error=RuntimeError("500"))

        with patch.dict(sys.modules, {"httpx": mock_httpx}):
            parser = EdgeFunctionTextParser(url="https://example.supabase.co")
            with pytest.raises(RuntimeError):
                await parser.parse("salmon", 30, TODAY)


class TestGeminiTextParser:
    @pytest.mark.asyncio
    async def test_requires_api_key(self):
        parser = GeminiTextParser(api_key="")
        with pytest.raises(ValueError, match="API key"):
            await parser.parse("salmon")

    @pytest.mark.asyncio
    async def test_parse_mocked(self):
        mock_model = MagicMock()
        mock_model.generate_content_async = AsyncMock(
            return_value=MagicMock(text="```json\n" + json.dumps(PAYLOAD) + "\n```")
        )
        mock_genai = MagicMock()
        mock_genai.GenerativeModel.return_value = mock_model
        mock_google = MagicMock()
        mock_google.generativeai = mock_genai

        with patch.dict(
            sys.modules,
            {"google": mock_google, "google.generativeai": mock_genai},
        ):
            parser = GeminiTextParser(api_key="test-key")
            result = await parser.parse("2 8oz salmon fillets", 30, TODAY)

        mock_genai.configure.assert_called_once_with(api_key="test-key")
        mock_genai.GenerativeModel.assert_called_once_with("gemini-2.0-flash")
        assert result.name == "Salmon Fillets"
        assert result.quantity == 2


class TestClaudeTextParser:
    @pytest.mark.asyncio
    async def test_requires_api_key(self):
        parser = ClaudeTextParser(api_key="")
        with pytest.raises(ValueError, match="API key"):
            await parser.parse("salmon")

    @pytest.mark.asyncio
    async def test_parse_mocked(self):
        mock_response = MagicMock()
        mock_response.content = [MagicMock(text=json.dumps(PAYLOAD))]

        mock_client = AsyncMock()
        mock_client.messages.create = AsyncMock(return_value=mock_response)

        mock_anthropic = MagicMock()
        mock_anthropic.AsyncAnthropic.return_value = mock_client

        with patch.dict(sys.modules, {"anthropic": mock_anthropic}):
            parser = ClaudeTextParser(api_key="test-key")
            result = await parser.parse("2 8oz salmon fillets", 30, TODAY)

        assert result.category == "Seafood"
        assert result.tags == ("fish", "dinner")
        kwargs = mock_client.messages.create.call_args.kwargs
        assert "2026-01-15" in kwargs["messages"][0]["content"]
