"""Stand-ins for requests.Session and for an async transport."""

import anyio
import requests

from reqlayer.models import ResponseEnvelope


def make_response(status=200, content=b'{"ok": true}', headers=None):
    resp = requests.Response()
    resp.status_code = status
    resp._content = content
    resp.headers.update(headers or {"Content-Type": "application/json"})
    resp.url = "http://example.test/"
    return resp


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response if response is not None else make_response()
        self.error = error
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


class RecordingTransport:
    """Remembers every call and answers with a fixed envelope."""

    def __init__(self, envelope=None, error=None):
        self.calls = []
        self.envelope = envelope or ResponseEnvelope(
            headers={"content-type": "application/json"}, status=200, data={"x": 1}
        )
        self.error = error

    async def _answer(self, *call):
        self.calls.append(call)
        await anyio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.envelope

    async def get(self, url):
        return await self._answer("get", url)

    async def post(self, url, body):
        return await self._answer("post", url, body)

    async def put(self, url, body):
        return await self._answer("put", url, body)

    async def delete(self, url, body):
        return await self._answer("delete", url, body)
