from abc import ABC, abstractmethod
from typing import Mapping, Optional

from gmo_coin.core.entities.raw_response import RawResponse


class IHttpClient(ABC):
    @abstractmethod
    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> RawResponse:
        """
        Performs a GET and returns the status code and body text.
        Failures are raised as GmoCoinError subclasses.
        """
        pass
