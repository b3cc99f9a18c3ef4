"""Async client for the GitHub issue search endpoint."""

from __future__ import annotations

import asyncio
import json
import logging

import aiohttp

from .config import API_VERSION, PER_PAGE, SEARCH_PATH, USER_AGENT, Settings
from .errors import ApiError, DecodeError, RateLimitError, TransportError
from .models import SearchPage

log = logging.getLogger(__name__)


class SearchClient:
    """Fetches single pages of issue search results over one shared session."""

    def __init__(self, settings: Settings, session: aiohttp.ClientSession | None = None):
        self.settings = settings
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "SearchClient":
        await self._ensure_session()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
            "X-GitHub-Api-Version": API_VERSION,
        }
        if self.settings.token:
            headers["Authorization"] = f"Bearer {self.settings.token}"
        return headers

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            # limit=0: no cap on pooled connections, fan-out is bounded by the caller
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout_s),
                connector=aiohttp.TCPConnector(limit=0),
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def fetch_page(self, query: str, page: int) -> SearchPage:
        if page < 1:
            raise ValueError(f"Page numbers start at 1, got {page}")
        session = await self._ensure_session()
        url = f"{self.settings.base_url}{SEARCH_PATH}"
        params = {"q": query, "per_page": str(PER_PAGE), "page": str(page)}

        log.debug("GET %s q=%r page=%d", url, query, page)
        try:
            async with session.get(url, params=params, headers=self._headers()) as resp:
                raw = await resp.read()
                status, headers = resp.status, resp.headers
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"Request for page {page} of {query!r} failed: {exc}") from exc

        if status >= 400:
            raise _api_error(status, headers, raw.decode("utf-8", errors="replace"))
        try:
            payload = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Response for page {page} is not valid UTF-8: {exc}") from exc
        except ValueError as exc:
            raise DecodeError(f"Response for page {page} is not JSON: {exc}") from exc
        result = SearchPage.from_payload(payload)
        if result.incomplete_results:
            log.warning("Search for %r timed out server-side; page %d may be incomplete", query, page)
        log.debug("Page %d of %r: %d items, total_count=%d", page, query, len(result.items), result.total_count)
        return result


def _api_error(status: int, headers, body: str) -> ApiError:
    message = body[:500]
    try:
        data = json.loads(body)
        if isinstance(data, dict) and data.get("message"):
            message = str(data["message"])
    except ValueError:
        pass

    exhausted = headers.get("x-ratelimit-remaining") == "0"
    if status == 429 or (status == 403 and exhausted):
        reset = headers.get("x-ratelimit-reset")
        reset_at = int(reset) if reset and reset.isdigit() else None
        if reset_at is not None:
            message = f"{message} (rate limit resets at epoch={reset_at})"
        return RateLimitError(status, message, reset_at=reset_at)
    return ApiError(status, message)
