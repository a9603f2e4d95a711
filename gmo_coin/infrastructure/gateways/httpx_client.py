import logging
from typing import Mapping, Optional

import httpx

from gmo_coin.core.end_point import HTTP_TIMEOUT_SECONDS
from gmo_coin.core.entities.raw_response import RawResponse
from gmo_coin.core.errors import TransportError
from gmo_coin.core.interfaces.http_client import IHttpClient

logger = logging.getLogger(__name__)


class HttpxClient(IHttpClient):
    """
    Implementation of IHttpClient backed by httpx.
    Non-2xx answers are returned as RawResponse; only failures to get an
    answer at all become TransportError.
    """

    def __init__(self, timeout: Optional[float] = None, client: Optional[httpx.AsyncClient] = None):
        """
        :param timeout: Request timeout in seconds. Defaults to GMO_COIN_HTTP_TIMEOUT.
        :param client: Optional caller-owned AsyncClient. When omitted a client
                       is opened and closed for every request.
        """
        self.timeout = timeout if timeout is not None else HTTP_TIMEOUT_SECONDS
        self._client = client
        logger.info(f"HttpxClient initialized. timeout={self.timeout}s shared_client={client is not None}")

    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> RawResponse:
        request_url = self._parse_url(url)
        logger.debug(f"GET {request_url}")

        try:
            if self._client is not None:
                response = await self._client.get(request_url, headers=headers, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(request_url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"GET {url} failed: {e!r}")
            raise TransportError(f"request to {url} failed: {e}", url=url) from e

        return RawResponse(status_code=response.status_code, body_text=response.text)

    @staticmethod
    def _parse_url(url: str) -> httpx.URL:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise TransportError(f"invalid request URL {url!r}: {e}", url=url) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise TransportError(f"invalid request URL {url!r}: absolute http(s) URL required", url=url)
        return parsed
