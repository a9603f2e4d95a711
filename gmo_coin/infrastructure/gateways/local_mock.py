from typing import Mapping, Optional

from gmo_coin.core.entities.raw_response import RawResponse
from gmo_coin.core.errors import UnknownError
from gmo_coin.core.interfaces.http_client import IHttpClient


class InmemClient(IHttpClient):
    """Canned transport for tests: same answer for every URL, no I/O."""

    def __init__(self, http_status_code: int, body_text: str, return_error: bool = False):
        self.http_status_code = http_status_code
        self.body_text = body_text
        self.return_error = return_error

    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> RawResponse:
        if self.return_error:
            raise UnknownError("InmemClient configured to fail")

        return RawResponse(status_code=self.http_status_code, body_text=self.body_text)
