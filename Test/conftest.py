import base64
import json
from collections import deque

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from mojang_api.client import MojangAPI
from mojang_api.core.config import Settings


class FakeAdapter(BaseAdapter):
    """
    Transport double for requests.Session.

    Queued responses (or exceptions) are served in order and every
    prepared request is recorded.
    """

    def __init__(self):
        super().__init__()
        self.queue = deque()
        self.requests = []

    def add_json(self, body=None, status: int = 200):
        content = b"" if body is None else json.dumps(body).encode("utf-8")
        self.queue.append((status, content, {"Content-Type": "application/json"}))

    def add_raw(self, content: bytes, status: int = 200, content_type: str = "application/octet-stream"):
        self.queue.append((status, content, {"Content-Type": content_type}))

    def add_error(self, exc: Exception):
        self.queue.append(exc)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self):
        return self.requests[-1]

    def send(self, request, **kwargs):
        self.requests.append(request)
        if not self.queue:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")

        item = self.queue.popleft()
        if isinstance(item, Exception):
            raise item

        status, content, headers = item
        resp = requests.Response()
        resp.status_code = status
        resp._content = content
        resp.headers = CaseInsensitiveDict(headers)
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


def request_json(request):
    return json.loads(request.body)


def encode_textures(textures: dict) -> str:
    payload = {
        "timestamp": 1626199183687,
        "profileId": "8667ba71b85a4004af54457a9734eed7",
        "profileName": "Steve",
        "textures": textures,
    }
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


@pytest.fixture
def settings():
    return Settings(RETRIES=1, BACKOFF=0.0, TIMEOUT=5.0, LOG_FILE=None)


@pytest.fixture
def adapter():
    return FakeAdapter()


@pytest.fixture
def session(adapter):
    s = requests.Session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


@pytest.fixture
def api(session, settings):
    return MojangAPI(session=session, settings=settings)
