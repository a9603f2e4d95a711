from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from gmo_coin.core.converters import (
    format_exchange_timestamp,
    parse_exchange_timestamp,
    str_to_float,
    str_to_int,
)
from gmo_coin.core.entities.rest_response import RestResponse

# Wire names are kept as aliases; models can be built from either form.
_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True)

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


class Side(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Trade(BaseModel):
    """A single execution from the trade-history endpoint."""
    model_config = _WIRE_CONFIG

    price: int = Field(ge=INT64_MIN, le=INT64_MAX)
    side: Side
    size: float
    timestamp: datetime

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value):
        return str_to_int(value)

    @field_validator("size", mode="before")
    @classmethod
    def _parse_size(cls, value):
        return str_to_float(value)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        return parse_exchange_timestamp(value)

    @field_serializer("timestamp")
    def _format_timestamp(self, value: datetime) -> str:
        return format_exchange_timestamp(value)


class Pagination(BaseModel):
    model_config = _WIRE_CONFIG

    current_page: int = Field(alias="currentPage", ge=INT64_MIN, le=INT64_MAX)
    count: int = Field(ge=INT64_MIN, le=INT64_MAX)

    @field_validator("current_page", "count", mode="before")
    @classmethod
    def _parse_int(cls, value):
        return str_to_int(value)


class TradesData(BaseModel):
    model_config = _WIRE_CONFIG

    trades: List[Trade] = Field(alias="list")
    pagination: Pagination


class Trades(BaseModel):
    """
    Root of the trade-history document:

        {"status": 0, "data": {"pagination": {...}, "list": [...]},
         "responsetime": "2019-03-28T09:28:07.980Z"}
    """
    model_config = _WIRE_CONFIG

    status: int = Field(ge=-32768, le=32767)
    response_time: datetime = Field(alias="responsetime")
    data: TradesData

    @field_validator("response_time", mode="before")
    @classmethod
    def _parse_response_time(cls, value):
        return parse_exchange_timestamp(value)

    @field_serializer("response_time")
    def _format_response_time(self, value: datetime) -> str:
        return format_exchange_timestamp(value)


class TradesResponse(RestResponse[Trades]):

    def trades(self) -> List[Trade]:
        return self.body.data.trades

    def pagination(self) -> Pagination:
        return self.body.data.pagination
