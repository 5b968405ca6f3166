from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class HttpVerb(str, Enum):
    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    @property
    def sends_body(self) -> bool:
        return self is not HttpVerb.GET


class ResponseEnvelope(BaseModel):
    """Full transport response: headers, status code and decoded payload."""

    headers: Dict[str, str] = Field(default_factory=dict)
    status: int
    data: Any = None


class RequestOptions(BaseModel):
    # query stays Any: malformed values are dropped by encode_query, never rejected
    query: Any = Field(default_factory=dict)
    body: Any = Field(default_factory=dict)
    with_response: bool = Field(False, alias="withResponse")

    model_config = ConfigDict(populate_by_name=True, frozen=True)
