"""
Default transport: requests.Session driven from a worker thread via AnyIO.
"""
import logging
import threading
from functools import partial
from typing import Any, List, Optional

import anyio
import requests

from .models import ResponseEnvelope

logger = logging.getLogger("reqlayer")


def join_url(base: str, url: Any) -> str:
    """Attach a built URL to the base; absolute URLs win."""
    base = (base or "").rstrip("/")
    if url is None:
        return base
    url = str(url)
    if url.startswith(("http://", "https://")) or not base:
        return url
    return base + "/" + url.lstrip("/")


def decode_body(resp: requests.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class RequestsTransport:
    """Transport over requests, one blocking call per worker thread.

    requests.Session is not guaranteed thread-safe, so each worker thread gets
    its own session. A session passed in explicitly is shared by every thread;
    the caller is then responsible for it tolerating concurrent use.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 60,
        raise_for_status: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.base = base_url
        self.timeout = timeout
        self.raise_for_status = raise_for_status
        self.session = session
        self._local = threading.local()
        self._owned: List[requests.Session] = []
        self._owned_lock = threading.Lock()

    def _session(self) -> requests.Session:
        if self.session is not None:
            return self.session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._owned_lock:
                self._owned.append(session)
        return session

    def _send(self, method: str, url: Any, body: Any = None) -> ResponseEnvelope:
        full_url = join_url(self.base, url)
        session = self._session()
        if body is None:
            resp = session.request(method, full_url, timeout=self.timeout)
        else:
            resp = session.request(
                method, full_url, json=body, timeout=self.timeout
            )
        logger.debug(f"{method} {full_url} -> {resp.status_code}")
        if self.raise_for_status:
            resp.raise_for_status()
        return ResponseEnvelope(
            headers=dict(resp.headers),
            status=resp.status_code,
            data=decode_body(resp),
        )

    async def _run(self, method: str, url: Any, body: Any = None) -> ResponseEnvelope:
        return await anyio.to_thread.run_sync(partial(self._send, method, url, body))

    async def get(self, url: Any) -> ResponseEnvelope:
        return await self._run("GET", url)

    async def post(self, url: Any, body: Any) -> ResponseEnvelope:
        return await self._run("POST", url, body)

    async def put(self, url: Any, body: Any) -> ResponseEnvelope:
        return await self._run("PUT", url, body)

    async def delete(self, url: Any, body: Any) -> ResponseEnvelope:
        return await self._run("DELETE", url, body)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
        with self._owned_lock:
            owned, self._owned = self._owned, []
            self._local = threading.local()
        for session in owned:
            session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
