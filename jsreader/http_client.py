from __future__ import annotations
import anyio
import httpx
from yarl import URL

from .config import Settings


class FetchError(Exception):
    """A reference could not be resolved to content."""

    def __init__(self, reference: str, message: str):
        super().__init__(message)
        self.reference = reference
        self.message = message


def is_remote(reference: str) -> bool:
    try:
        return URL(reference).scheme.lower() in ("http", "https")
    except ValueError:
        return False


def build_client(settings: Settings, **kwargs) -> httpx.AsyncClient:
    """Shared client: fixed timeout and browser User-Agent, no retries."""
    limits = httpx.Limits(max_connections=max(settings.THREADS, 1), max_keepalive_connections=max(settings.THREADS, 1))
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.TIMEOUT_S),
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=settings.FOLLOW_REDIRECTS,
        limits=limits,
        proxy=settings.PROXY_URL or None,
        **kwargs,
    )


async def fetch_remote(client: httpx.AsyncClient, url: str) -> bytes:
    try:
        r = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(url, f"error fetching JS file: {exc}") from exc
    if r.status_code != httpx.codes.OK:
        raise FetchError(url, f"unexpected status code: {r.status_code}")
    return r.content


async def read_local(path: str) -> bytes:
    try:
        return await anyio.Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        raise FetchError(path, f"error reading local file: {exc}") from exc


async def fetch_reference(client: httpx.AsyncClient, reference: str) -> bytes:
    """Resolve ``reference`` (URL or local path) to raw content or raise :class:`FetchError`."""
    if is_remote(reference):
        return await fetch_remote(client, reference)
    return await read_local(reference)
