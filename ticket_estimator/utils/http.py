from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)

_session: aiohttp.ClientSession | None = None
_timeout_seconds: float = 30.0

RETRY_BACKOFF = 2.0


def configure_http(timeout_seconds: float) -> None:
    global _timeout_seconds
    _timeout_seconds = timeout_seconds


async def get_session() -> aiohttp.ClientSession:
    global _session
    if _session is None or _session.closed:
        timeout = aiohttp.ClientTimeout(total=_timeout_seconds, connect=min(10.0, _timeout_seconds))
        _session = aiohttp.ClientSession(
            timeout=timeout,
            headers={"User-Agent": "TicketEstimator/1.0", "Accept": "application/json"},
        )
    return _session


async def close_session() -> None:
    global _session
    if _session and not _session.closed:
        await _session.close()
        _session = None


async def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    retries: int = 1,
) -> Any:
    session = await get_session()
    retries = max(1, retries)
    last_exc: Exception | None = None
    for attempt in range(1, retries + 1):
        try:
            async with session.get(url, params=params) as resp:
                resp.raise_for_status()
                return await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            last_exc = exc
            if attempt < retries:
                wait = RETRY_BACKOFF ** attempt
                logger.warning(
                    "%s attempt %d/%d failed (%s), retry in %.0fs",
                    url, attempt, retries, exc, wait,
                )
                await asyncio.sleep(wait)
            else:
                logger.error("%s failed after %d attempts: %s", url, retries, exc)
    raise last_exc  # type: ignore[misc]
