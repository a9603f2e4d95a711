import logging
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from gmo_coin.core.end_point import PUBLIC_ENDPOINT
from gmo_coin.core.entities.raw_response import RawResponse
from gmo_coin.core.entities.rest_response import RestResponse
from gmo_coin.core.entities.symbol import Symbol
from gmo_coin.core.entities.trade import Trades, TradesResponse
from gmo_coin.core.errors import DecodeError
from gmo_coin.core.interfaces.http_client import IHttpClient

logger = logging.getLogger(__name__)

TRADES_API_PATH = "/v1/trades"
DEFAULT_PAGE = 1
DEFAULT_COUNT = 100

B = TypeVar("B", bound=BaseModel)
R = TypeVar("R", bound=RestResponse)


def build_trades_url(
    symbol: Union[Symbol, str],
    page: int = DEFAULT_PAGE,
    count: int = DEFAULT_COUNT,
    endpoint: str = PUBLIC_ENDPOINT,
) -> str:
    symbol = Symbol(symbol)
    return f"{endpoint}{TRADES_API_PATH}?symbol={symbol}&page={page}&count={count}"


def _error_field(err: ValidationError) -> Optional[str]:
    errors = err.errors()
    if not errors or not errors[0]["loc"]:
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


def parse_from_http_response(
    response: RawResponse,
    body_model: Type[B],
    response_model: Type[R] = RestResponse,
) -> R:
    """
    Decodes response.body_text into body_model and wraps it, together with
    the HTTP status code, in response_model.

    Raises DecodeError when the body is not JSON, does not have the expected
    shape, or a field fails conversion.
    """
    try:
        body = body_model.model_validate_json(response.body_text)
    except ValidationError as e:
        field = _error_field(e)
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        location = f" at {field}" if field else ""
        raise DecodeError(
            f"could not decode {body_model.__name__}{location}: {reason}",
            field=field,
            body_text=response.body_text,
        ) from e

    return response_model(http_status_code=response.status_code, body=body)


async def get_trades_with_options(
    http_client: IHttpClient,
    symbol: Union[Symbol, str],
    page: int,
    count: int,
) -> TradesResponse:
    """
    Fetches one page of trade history for symbol.

    Transport failures propagate from http_client unchanged; a body that
    cannot be decoded raises DecodeError.
    """
    url = build_trades_url(symbol, page, count)
    logger.debug(f"Fetching trades: {url}")

    response = await http_client.get(url, headers={})
    try:
        result = parse_from_http_response(response, Trades, TradesResponse)
    except DecodeError as e:
        logger.error(f"Failed to decode trades for {symbol} (HTTP {response.status_code}): {e}")
        raise

    logger.debug(f"Decoded {len(result.trades())} trades for {symbol}, page {result.pagination().current_page}")
    return result


async def get_trades(http_client: IHttpClient, symbol: Union[Symbol, str]) -> TradesResponse:
    return await get_trades_with_options(http_client, symbol, DEFAULT_PAGE, DEFAULT_COUNT)
