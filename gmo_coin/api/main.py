import logging

from fastapi import Depends, FastAPI, HTTPException, Query

from gmo_coin.core.end_point import PUBLIC_ENDPOINT
from gmo_coin.core.entities.symbol import Symbol
from gmo_coin.core.errors import DecodeError, TransportError, UnknownError
from gmo_coin.core.interfaces.http_client import IHttpClient
from gmo_coin.core.use_cases.trades import DEFAULT_COUNT, DEFAULT_PAGE, get_trades_with_options
from gmo_coin.infrastructure.gateways.httpx_client import HttpxClient

# Setup Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("GmoCoin")

app = FastAPI(title="GMO Coin Public API", version="0.1.0", description="Typed access to the public trade history")

# --- Dependency Injection ---

def get_http_client() -> IHttpClient:
    return HttpxClient()

# --- Endpoints ---

@app.get("/health")
async def health():
    return {"status": "healthy", "endpoint": PUBLIC_ENDPOINT}

@app.get("/v1/trades")
async def get_trades(
    symbol: str = Query(..., description="Trading pair, e.g. BTC or BTC_JPY"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    count: int = Query(DEFAULT_COUNT, ge=1),
    http_client: IHttpClient = Depends(get_http_client)
):
    try:
        pair = Symbol(symbol)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown symbol: {symbol}")

    try:
        result = await get_trades_with_options(http_client, pair, page, count)
    except TransportError as e:
        logger.error(f"Upstream unreachable for {symbol}: {e}")
        raise HTTPException(status_code=502, detail="Upstream unreachable")
    except DecodeError as e:
        raise HTTPException(status_code=502, detail=f"Upstream response could not be decoded: {e.field or 'body'}")
    except UnknownError as e:
        logger.error(f"Unexpected failure for {symbol}: {e}")
        raise HTTPException(status_code=500, detail="Unexpected failure")

    return {
        "httpStatusCode": result.http_status_code,
        **result.body.model_dump(mode="json", by_alias=True),
    }
