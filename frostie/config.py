"""TOML configuration loader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class EdgeParserConfig:
    url: str = ""
    api_key: str = ""


@dataclass
class GeminiParserConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"


@dataclass
class ClaudeParserConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class ParserConfig:
    backend: str = "edge"
    default_expiration_days: int = 30
    edge: EdgeParserConfig = field(default_factory=EdgeParserConfig)
    gemini: GeminiParserConfig = field(default_factory=GeminiParserConfig)
    claude: ClaudeParserConfig = field(default_factory=ClaudeParserConfig)


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class FrostieConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> FrostieConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Endpoints and API keys can be supplied via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    prs = raw.get("parser", {})
    log = raw.get("logging", {})

    edge_cfg = prs.get("edge", {})
    gemini_cfg = prs.get("gemini", {})
    claude_cfg = prs.get("claude", {})

    # Config file → environment variable
    edge_url = edge_cfg.get("url", "") or os.environ.get("SUPABASE_URL", "")
    edge_key = edge_cfg.get("api_key", "") or os.environ.get(
        "SUPABASE_ANON_KEY", ""
    )
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )

    return FrostieConfig(
        parser=ParserConfig(
            backend=prs.get("backend", "edge"),
            default_expiration_days=prs.get("default_expiration_days", 30),
            edge=EdgeParserConfig(url=edge_url, api_key=edge_key),
            gemini=GeminiParserConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.0-flash"),
            ),
            claude=ClaudeParserConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
        ),
        logging=LoggingConfig(level=log.get("level", "WARNING")),
    )
