from pydantic import BaseModel, ConfigDict, Field


class RawResponse(BaseModel):
    """
    What a transport hands back: the HTTP status code and the body text,
    before any decoding.
    """
    model_config = ConfigDict(frozen=True)

    status_code: int = Field(ge=0, le=65535)
    body_text: str
