import json
import logging
from typing import Any, Dict, List, Optional

import anyio
import requests
import typer
from pydantic import ValidationError

from .config import CONFIG_FILE, ClientConfig, load_config, save_config
from .httphelpers import HttpClient
from .log import setup_logger
from .models import HttpVerb, RequestOptions
from .transport import RequestsTransport
from .url_utils import build_url


app = typer.Typer(add_completion=False, no_args_is_help=True, help="reqlayer HTTP CLI")

QUERY_HELP = "Query parameter as key=value (repeat a key for a list)"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    setup_logger(logging.DEBUG if verbose else logging.INFO)


def parse_query(pairs: List[str]) -> Dict[str, Any]:
    """Turn ['a=1', 'b=2', 'b=3'] into {'a': '1', 'b': ['2', '3']}."""
    query: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"expected key=value, got {pair!r}")
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


def path_spec(segments: List[str], literal: bool) -> List[Any]:
    return list(segments) if literal else [list(segments)]


def load_client_config(server: Optional[str], timeout: Optional[float]) -> ClientConfig:
    cfg = load_config()
    if server is not None:
        cfg["server"] = server
    if timeout is not None:
        cfg["timeout"] = timeout
    try:
        return ClientConfig(**cfg)
    except ValidationError as e:
        typer.echo(f"Error: Invalid configuration: {e}")
        raise typer.Exit(code=1)


@app.command("url", help="Print the URL built from path segments and query")
def cli_url(
    segments: List[str] = typer.Argument(..., help="Path segments"),
    query: List[str] = typer.Option([], "--query", "-q", help=QUERY_HELP),
    literal: bool = typer.Option(
        False, help="Join segments as given, without percent-encoding"
    ),
):
    typer.echo(build_url(path_spec(segments, literal), parse_query(query)))


def run_request(
    verb: HttpVerb,
    segments: List[str],
    query: List[str],
    data: Optional[str],
    with_response: bool,
    literal: bool,
    server: Optional[str],
    timeout: Optional[float],
):
    options: Dict[str, Any] = {"query": parse_query(query), "with_response": with_response}
    if data is not None:
        try:
            options["body"] = json.loads(data)
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"--data is not valid JSON: {e}")

    cfg = load_client_config(server, timeout)
    transport = RequestsTransport(
        cfg.server, timeout=cfg.timeout, raise_for_status=cfg.raise_for_status
    )
    client = HttpClient(transport)

    async def send():
        return await client.request(
            verb, path_spec(segments, literal), RequestOptions(**options)
        )

    try:
        with transport:
            result = anyio.run(send)
    except requests.RequestException as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(code=1)

    if with_response:
        result = result.model_dump()
    typer.echo(json.dumps(result, indent=2, default=str))


@app.command("get", help="Send a GET request")
def cli_get(
    segments: List[str] = typer.Argument(..., help="Path segments"),
    query: List[str] = typer.Option([], "--query", "-q", help=QUERY_HELP),
    with_response: bool = typer.Option(False, help="Print status and headers too"),
    literal: bool = typer.Option(False, help="Do not percent-encode segments"),
    server: Optional[str] = typer.Option(None, help="Base URL (overrides config)"),
    timeout: Optional[float] = typer.Option(None, help="Timeout in seconds"),
):
    run_request(HttpVerb.GET, segments, query, None, with_response, literal, server, timeout)


def _body_command(verb: HttpVerb):
    def command(
        segments: List[str] = typer.Argument(..., help="Path segments"),
        query: List[str] = typer.Option([], "--query", "-q", help=QUERY_HELP),
        data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON body"),
        with_response: bool = typer.Option(False, help="Print status and headers too"),
        literal: bool = typer.Option(False, help="Do not percent-encode segments"),
        server: Optional[str] = typer.Option(None, help="Base URL (overrides config)"),
        timeout: Optional[float] = typer.Option(None, help="Timeout in seconds"),
    ):
        run_request(verb, segments, query, data, with_response, literal, server, timeout)

    command.__name__ = f"cli_{verb.value}"
    return command


for _verb in (HttpVerb.POST, HttpVerb.PUT, HttpVerb.DELETE):
    app.command(_verb.value, help=f"Send a {_verb.name} request")(_body_command(_verb))


@app.command("configure", help="Store defaults in the config file")
def cli_configure(
    server: Optional[str] = typer.Option(None, help="Base URL"),
    timeout: Optional[float] = typer.Option(None, help="Timeout in seconds"),
    raise_for_status: Optional[bool] = typer.Option(
        None, help="Fail on non-2xx responses"
    ),
):
    cfg = load_config()
    if server is not None:
        cfg["server"] = server
    if timeout is not None:
        cfg["timeout"] = timeout
    if raise_for_status is not None:
        cfg["raiseForStatus"] = raise_for_status

    try:
        ClientConfig(**cfg)
    except ValidationError as e:
        typer.echo(f"Error: Invalid configuration: {e}")
        raise typer.Exit(code=1)

    save_config(cfg)
    typer.echo(f"Configuration saved to {CONFIG_FILE}")
