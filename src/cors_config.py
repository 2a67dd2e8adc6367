"""
CORS settings for the name formatting API.

The formatter page is usually served from a static host separate from the API,
so local dev servers and GitHub Pages deployments are allowed unless overridden.
"""
from __future__ import annotations

import os
from typing import List, Sequence, Tuple

DEFAULT_EXPLICIT_ORIGINS: Sequence[str] = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:8080",
]

DEFAULT_REGEX_ORIGINS: Sequence[str] = [r"https://[a-z0-9-]+\.github\.io"]


def _env_list(name: str, defaults: Sequence[str]) -> List[str]:
    """Comma-separated env override; unset or blank values fall back to defaults."""
    raw_value = os.environ.get(name)
    if raw_value is None:
        return list(defaults)
    entries = [entry.strip() for entry in raw_value.split(",") if entry.strip()]
    return entries or list(defaults)


def get_cors_settings() -> Tuple[List[str], List[str]]:
    """
    Returns the explicit origins and regex-based origins allowed by the server.

    * CORS_ALLOW_ORIGINS controls the explicit list (comma-separated).
    * CORS_ALLOW_ORIGIN_REGEXES controls regex patterns (comma-separated).
    """
    explicit = _env_list("CORS_ALLOW_ORIGINS", DEFAULT_EXPLICIT_ORIGINS)
    # A bare '*' belongs in the explicit list, never as a regex.
    regexes = [pattern for pattern in _env_list("CORS_ALLOW_ORIGIN_REGEXES", DEFAULT_REGEX_ORIGINS) if pattern != "*"]
    return explicit, regexes


def combine_regex_patterns(patterns: Sequence[str]) -> str | None:
    """CORSMiddleware takes a single regex, so join the patterns as alternatives."""
    if not patterns:
        return None
    return "|".join(f"(?:{pattern})" for pattern in patterns)
