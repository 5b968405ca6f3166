"""Small async convenience layer for issuing HTTP requests.

URLs are built from path specs (strings or nested segment lists) plus a flat
query mapping; the actual I/O is left to an injected transport.
"""

from .httphelpers import (
    HttpClient,
    Transport,
    dispatch,
    http_delete,
    http_get,
    http_post,
    http_put,
    response_adapter,
)
from .models import HttpVerb, RequestOptions, ResponseEnvelope
from .transport import RequestsTransport
from .url_utils import build_url, encode_path, encode_query, qpart

__all__ = [
    "HttpClient",
    "HttpVerb",
    "RequestOptions",
    "RequestsTransport",
    "ResponseEnvelope",
    "Transport",
    "build_url",
    "dispatch",
    "encode_path",
    "encode_query",
    "http_delete",
    "http_get",
    "http_post",
    "http_put",
    "qpart",
    "response_adapter",
]
