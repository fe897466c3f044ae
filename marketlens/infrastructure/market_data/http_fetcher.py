"""
Infrastructure helper: JSON over HTTP with route fallback.

Tries the direct URL first, then public pass-through proxies in shuffled
order, returning the first successful JSON body. All httpx details are
confined here; callers only see DataProviderUnavailableError.
"""

import logging
import random
import time
from typing import Any, Callable, Optional
from urllib.parse import quote

import httpx

from marketlens.domain.errors import DataProviderUnavailableError

logger = logging.getLogger(__name__)


class FallbackHttpFetcher:
    """Fetches JSON documents, rotating through proxy routes on failure."""

    PROXY_ROUTES = (
        "https://api.allorigins.win/raw?url={url}",
        "https://corsproxy.io/?{url}",
        "https://api.codetabs.com/v1/proxy?quest={url}",
    )

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        use_proxies: bool = True,
        timeout: float = 15.0,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._use_proxies = use_proxies
        self._rng = rng or random.Random()
        self._clock = clock

    def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET *url* with *params* and decode the JSON body.

        Raises:
            DataProviderUnavailableError: if every route failed (transport
                error, non-2xx status or undecodable body).
        """
        last_error: Optional[Exception] = None
        status_code: Optional[int] = None
        for route in self._routes(url, params or {}):
            try:
                response = self._client.get(route)
                if status_code is None:
                    status_code = response.status_code
                response.raise_for_status()
                return response.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("Fetch route failed for %s: %s", url, exc)
                last_error = exc
        raise DataProviderUnavailableError(
            f"Connection failed across all routes for {url}",
            status_code=status_code,
        ) from last_error

    def close(self) -> None:
        self._client.close()

    def _routes(self, url: str, params: dict[str, Any]) -> list[str]:
        routes = [str(httpx.URL(url, params=params))]
        if not self._use_proxies:
            return routes

        busted = str(httpx.URL(url, params={**params, "_t": int(self._clock() * 1000)}))
        proxies = list(self.PROXY_ROUTES)
        self._rng.shuffle(proxies)
        routes.extend(template.format(url=quote(busted, safe="")) for template in proxies)
        return routes
