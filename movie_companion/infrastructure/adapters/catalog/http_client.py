from typing import Optional

import httpx

from movie_companion.infrastructure.config.settings import CatalogSettings


class _ClientStore:
    client: Optional[httpx.AsyncClient] = None


def set_http_client(client: httpx.AsyncClient) -> None:
    _ClientStore.client = client


def get_http_client() -> httpx.AsyncClient:
    if _ClientStore.client is None:
        settings = CatalogSettings()
        _ClientStore.client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout)
        )
    return _ClientStore.client


async def close_http_client() -> None:
    if _ClientStore.client is not None:
        await _ClientStore.client.aclose()
        _ClientStore.client = None
