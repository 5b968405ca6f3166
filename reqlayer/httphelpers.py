import logging
from typing import Any, Awaitable, Callable, Optional, Protocol, Union

from .models import HttpVerb, RequestOptions, ResponseEnvelope
from .url_utils import build_url

logger = logging.getLogger("reqlayer")


class Transport(Protocol):
    """Anything that can send one request and hand back a ResponseEnvelope."""

    async def get(self, url: Any) -> ResponseEnvelope: ...

    async def post(self, url: Any, body: Any) -> ResponseEnvelope: ...

    async def put(self, url: Any, body: Any) -> ResponseEnvelope: ...

    async def delete(self, url: Any, body: Any) -> ResponseEnvelope: ...


def response_adapter(with_response: bool = False) -> Callable[[ResponseEnvelope], Any]:
    """Return a function that keeps the whole envelope or only its data."""
    if with_response:
        return lambda envelope: envelope
    return _data_of


def _data_of(envelope: Union[ResponseEnvelope, dict]) -> Any:
    if isinstance(envelope, dict):
        return envelope["data"]
    return envelope.data


async def dispatch(
    transport: Transport,
    verb: HttpVerb,
    url_spec: Any,
    options: Optional[RequestOptions] = None,
) -> Any:
    """Build the URL, send exactly one request and adapt the response.

    Transport exceptions propagate as raised.
    """
    options = options or RequestOptions()
    url = build_url(url_spec, options.query)
    send: Callable[..., Awaitable[ResponseEnvelope]] = getattr(transport, verb.value)

    logger.debug(f"{verb.name} {url}")
    if verb.sends_body:
        envelope = await send(url, options.body)
    else:
        envelope = await send(url)
    return response_adapter(options.with_response)(envelope)


def _options(query: Any, body: Any, with_response: bool) -> RequestOptions:
    values = {"with_response": with_response}
    if query is not None:
        values["query"] = query
    if body is not None:
        values["body"] = body
    return RequestOptions(**values)


class HttpClient:
    def __init__(self, transport: Transport):
        self.transport = transport

    async def request(
        self, verb: HttpVerb, url_spec: Any, options: Optional[RequestOptions] = None
    ) -> Any:
        return await dispatch(self.transport, verb, url_spec, options)

    async def get(self, url_spec: Any, query: Any = None, with_response: bool = False):
        return await self.request(
            HttpVerb.GET, url_spec, _options(query, None, with_response)
        )

    async def post(
        self, url_spec: Any, query: Any = None, body: Any = None, with_response: bool = False
    ):
        return await self.request(
            HttpVerb.POST, url_spec, _options(query, body, with_response)
        )

    async def put(
        self, url_spec: Any, query: Any = None, body: Any = None, with_response: bool = False
    ):
        return await self.request(
            HttpVerb.PUT, url_spec, _options(query, body, with_response)
        )

    async def delete(
        self, url_spec: Any, query: Any = None, body: Any = None, with_response: bool = False
    ):
        return await self.request(
            HttpVerb.DELETE, url_spec, _options(query, body, with_response)
        )


async def http_get(
    transport: Transport, url_spec: Any, query: Any = None, with_response: bool = False
) -> Any:
    return await HttpClient(transport).get(url_spec, query, with_response)


async def http_post(
    transport: Transport,
    url_spec: Any,
    query: Any = None,
    body: Any = None,
    with_response: bool = False,
) -> Any:
    return await HttpClient(transport).post(url_spec, query, body, with_response)


async def http_put(
    transport: Transport,
    url_spec: Any,
    query: Any = None,
    body: Any = None,
    with_response: bool = False,
) -> Any:
    return await HttpClient(transport).put(url_spec, query, body, with_response)


async def http_delete(
    transport: Transport,
    url_spec: Any,
    query: Any = None,
    body: Any = None,
    with_response: bool = False,
) -> Any:
    return await HttpClient(transport).delete(url_spec, query, body, with_response)
