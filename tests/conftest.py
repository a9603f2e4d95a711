"""
Pytest configuration and shared fixtures.
"""
import pytest

from gmo_coin.infrastructure.gateways.local_mock import InmemClient

TRADES_RESPONSE_SAMPLE = """
{
  "status": 0,
  "data": {
    "pagination": {
      "currentPage": 1,
      "count": 30
    },
    "list": [
      {
        "price": "750760",
        "side": "BUY",
        "size": "0.1",
        "timestamp": "2018-03-30T12:34:56.789Z"
      },
      {
        "price": "750760",
        "side": "BUY",
        "size": "0.1",
        "timestamp": "2018-03-30T12:34:56.789Z"
      }
    ]
  },
  "responsetime": "2019-03-28T09:28:07.980Z"
}
"""


@pytest.fixture
def trades_body() -> str:
    return TRADES_RESPONSE_SAMPLE


@pytest.fixture
def ok_client(trades_body: str) -> InmemClient:
    """In-memory transport answering 200 with the sample trades body."""
    return InmemClient(http_status_code=200, body_text=trades_body, return_error=False)
