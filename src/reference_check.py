"""
Reachability check for the airline reference pages.

Reads every URL from the reference document, fetches it, and scans reachable pages for
sentences that look like worked name examples, which is usually where airline guidance
changes first. Failures here are advisory: they say nothing about engine correctness.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import httpx
import pandas as pd
import requests

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"https?://[^\s>)]+")
EXAMPLE_PATTERN = re.compile(r"\bexample\b|\be\.g\b|\bsuch as\b", re.IGNORECASE)
SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+|\n+")

_STYLE_BLOCK = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_SCRIPT_BLOCK = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_NUMERIC_ENTITY = re.compile(r"&#\d+;")
_MULTI_SPACE = re.compile(r"\s{2,}")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


@dataclass
class FetchConfig:
    timeout_seconds: float = 15.0
    concurrency: int = 1
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = "text/html,application/xhtml+xml,*/*;q=0.9"
    accept_language: str = "en-US,en;q=0.9"

    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }

    @classmethod
    def from_env(cls) -> "FetchConfig":
        timeout = cls.timeout_seconds
        raw_timeout = os.environ.get("REFERENCE_FETCH_TIMEOUT")
        try:
            candidate = float(raw_timeout) if raw_timeout and raw_timeout.strip() else timeout
            if candidate > 0:
                timeout = candidate
        except ValueError:
            pass

        concurrency = cls.concurrency
        raw_concurrency = os.environ.get("REFERENCE_FETCH_CONCURRENCY")
        try:
            candidate = int(raw_concurrency) if raw_concurrency and raw_concurrency.strip() else concurrency
            if candidate > 0:
                concurrency = candidate
        except ValueError:
            pass
        return cls(timeout_seconds=timeout, concurrency=concurrency)


@dataclass
class FetchResult:
    url: str
    ok: bool
    status: int
    body: str = ""
    error: Optional[str] = None
    latency_ms: float = 0.0


@dataclass
class UrlCheck:
    result: FetchResult
    snippets: List[str] = field(default_factory=list)


def parse_reference_urls(path: str | Path) -> List[str]:
    """Unique http(s) URLs in the order they first appear in the document."""
    text = Path(path).read_text(encoding="utf-8")
    return list(dict.fromkeys(URL_PATTERN.findall(text)))


def strip_html(html: str) -> str:
    text = _STYLE_BLOCK.sub("", html)
    text = _SCRIPT_BLOCK.sub("", text)
    text = _TAG.sub(" ", text)
    text = text.replace("&amp;", "&").replace("&lt;", "<").replace("&gt;", ">")
    text = text.replace("&nbsp;", " ")
    text = _NUMERIC_ENTITY.sub("", text)
    return _MULTI_SPACE.sub(" ", text).strip()


def find_example_snippets(text: str, limit: int = 4) -> List[str]:
    """Sentences that mention an example ("example", "e.g", "such as")."""
    snippets = []
    for sentence in SENTENCE_SPLIT.split(text):
        if not sentence or not EXAMPLE_PATTERN.search(sentence):
            continue
        sentence = sentence.strip()
        if 15 < len(sentence) < 300:
            snippets.append(sentence)
        if len(snippets) >= limit:
            break
    return snippets


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def _log_outcome(result: FetchResult) -> None:
    if result.ok:
        logger.debug(
            "reference fetched",
            extra={"url": result.url, "status_code": result.status, "latency_ms": result.latency_ms},
        )
    else:
        logger.warning(
            "reference unreachable: %s",
            result.error or f"HTTP {result.status}",
            extra={"url": result.url, "status_code": result.status, "latency_ms": result.latency_ms},
        )


def fetch_page(url: str, config: FetchConfig | None = None, session: requests.Session | None = None) -> FetchResult:
    """Fetch one URL; network problems become a failed result instead of an exception."""
    config = config or FetchConfig()
    getter = session.get if session is not None else requests.get
    start = time.perf_counter()
    try:
        response = getter(
            url,
            headers=config.headers(),
            timeout=config.timeout_seconds,
            allow_redirects=True,
        )
        ok = _is_success(response.status_code)
        result = FetchResult(url=url, ok=ok, status=response.status_code, body=response.text if ok else "")
    except requests.Timeout:
        result = FetchResult(url=url, ok=False, status=0, error="timeout")
    except requests.RequestException as exc:
        result = FetchResult(url=url, ok=False, status=0, error=str(exc) or exc.__class__.__name__)
    result.latency_ms = round((time.perf_counter() - start) * 1000, 2)
    _log_outcome(result)
    return result


async def _fetch_async(
    client: httpx.AsyncClient,
    url: str,
    semaphore: asyncio.Semaphore,
) -> FetchResult:
    async with semaphore:
        start = time.perf_counter()
        try:
            response = await client.get(url)
            ok = _is_success(response.status_code)
            result = FetchResult(url=url, ok=ok, status=response.status_code, body=response.text if ok else "")
        except httpx.TimeoutException:
            result = FetchResult(url=url, ok=False, status=0, error="timeout")
        # InvalidURL is raised while building the request and is not an HTTPError.
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            result = FetchResult(url=url, ok=False, status=0, error=str(exc) or exc.__class__.__name__)
        result.latency_ms = round((time.perf_counter() - start) * 1000, 2)
    _log_outcome(result)
    return result


async def fetch_pages_async(
    urls: List[str],
    config: FetchConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> List[FetchResult]:
    semaphore = asyncio.Semaphore(max(1, config.concurrency))
    async with httpx.AsyncClient(
        headers=config.headers(),
        timeout=config.timeout_seconds,
        follow_redirects=True,
        transport=transport,
    ) as client:
        tasks = [asyncio.create_task(_fetch_async(client, url, semaphore)) for url in urls]
        return list(await asyncio.gather(*tasks))


def fetch_pages(
    urls: Iterable[str],
    config: FetchConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> List[FetchResult]:
    """Fetch every URL; results keep the input order whether or not requests overlap."""
    config = config or FetchConfig()
    url_list = list(urls)
    if not url_list:
        return []
    if config.concurrency <= 1:
        with requests.Session() as session:
            return [fetch_page(url, config, session=session) for url in url_list]
    return asyncio.run(fetch_pages_async(url_list, config, transport=transport))


def check_references(
    path: str | Path,
    config: FetchConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> List[UrlCheck]:
    urls = parse_reference_urls(path)
    logger.info("checking %d reference URLs from %s", len(urls), path)
    checks = []
    for result in fetch_pages(urls, config, transport=transport):
        snippets = find_example_snippets(strip_html(result.body)) if result.ok else []
        checks.append(UrlCheck(result=result, snippets=snippets))
    return checks


def checks_to_frame(checks: Iterable[UrlCheck]) -> pd.DataFrame:
    rows = [
        {
            "URL": check.result.url,
            "OK": check.result.ok,
            "Status": check.result.status,
            "Error": check.result.error or "",
            "Latency (ms)": check.result.latency_ms,
            "Example Snippets": " | ".join(check.snippets),
        }
        for check in checks
    ]
    return pd.DataFrame(rows, columns=["URL", "OK", "Status", "Error", "Latency (ms)", "Example Snippets"])
