"""
HTTP transport for the NHTSA endpoints.

A thin wrapper over a synchronous httpx client: fixed timeout, bounded
redirects, non-2xx treated as failure. Nothing raised by httpx escapes;
every failure comes back as a TRANSPORT_FAILURE result.
"""

import logging
from typing import Optional

import httpx

from vpic_lookup.config import Settings, settings as default_settings
from vpic_lookup.models.result import LookupResult

logger = logging.getLogger(__name__)


class HttpTransport:
    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or default_settings
        self.client = httpx.Client(
            timeout=self.config.timeout,
            follow_redirects=True,
            max_redirects=self.config.max_redirects,
            headers={"User-Agent": self.config.user_agent},
            transport=transport,
        )

    def _fetch(self, url: str) -> LookupResult:
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"GET {url} failed: {e}")
            return LookupResult.failure(str(e))
        return LookupResult.ok(response)

    def get(self, url: str) -> LookupResult:
        """GET a URL and return its body text"""
        fetched = self._fetch(url)
        if not fetched.success:
            return fetched
        return LookupResult.ok(fetched.data.text)

    def get_json(self, url: str) -> LookupResult:
        """GET a URL and parse the body as a JSON object"""
        fetched = self._fetch(url)
        if not fetched.success:
            return fetched

        try:
            data = fetched.data.json()
        except ValueError as e:
            logger.warning(f"GET {url} returned a body that is not JSON: {e}")
            return LookupResult.failure(f"Malformed response body: {e}")

        if not isinstance(data, dict):
            logger.warning(f"GET {url} returned {type(data).__name__}, expected an object")
            return LookupResult.failure("Malformed response body: expected a JSON object")

        return LookupResult.ok(data)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
