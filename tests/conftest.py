"""
Pytest configuration and shared fixtures for the pixela tests.

HTTP traffic never leaves the process: every client is wired to an
``httpx.MockTransport`` that records requests and replays canned bodies.
"""

import json
from collections import deque

import httpx
import pytest

from pixela import PixelaClient

USERNAME = "alice"
TOKEN = "thisissecret"
OK_BODY = {"message": "Success.", "isSuccess": True}


class RecordingHandler:
    """MockTransport handler that records requests and serves queued responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: deque = deque()
        self.on_request = None

    def reply(self, body=None, status_code=200, text=None):
        """Queue a response; ``body`` is JSON-encoded unless ``text`` is given."""
        if text is None:
            text = json.dumps(OK_BODY if body is None else body)
        self._responses.append(httpx.Response(status_code, text=text))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.on_request is not None:
            self.on_request(request)
        if self._responses:
            return self._responses.popleft()
        return httpx.Response(200, text=json.dumps(OK_BODY))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(handler):
    pixela = PixelaClient(USERNAME, TOKEN, transport=httpx.MockTransport(handler))
    yield pixela
    pixela.close()
