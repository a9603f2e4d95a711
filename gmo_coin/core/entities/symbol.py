from enum import Enum


class Symbol(str, Enum):
    """Trading pairs accepted by the public API. The value is the wire form."""
    BTC = "BTC"
    ETH = "ETH"
    BCH = "BCH"
    LTC = "LTC"
    XRP = "XRP"
    BTC_JPY = "BTC_JPY"
    ETH_JPY = "ETH_JPY"
    BCH_JPY = "BCH_JPY"
    LTC_JPY = "LTC_JPY"
    XRP_JPY = "XRP_JPY"

    def __str__(self) -> str:
        return self.value
