from typing import Optional


class GmoCoinError(Exception):
    """Base class for every failure raised by the client."""


class TransportError(GmoCoinError):
    """
    The request never produced a response: unreachable host, TLS/connection
    failure, timeout, or a request URL that could not be parsed.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class DecodeError(GmoCoinError):
    """
    The server answered, but the body could not be interpreted as the
    expected structure.
    """

    def __init__(self, message: str, field: Optional[str] = None, body_text: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.body_text = body_text


class UnknownError(GmoCoinError):
    pass
