from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class RestResponse(BaseModel, Generic[T]):
    """A decoded body paired with the HTTP status code it arrived with."""
    model_config = ConfigDict(frozen=True)

    http_status_code: int
    body: T
