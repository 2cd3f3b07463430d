import json
from typing import List

import httpx
import pytest

from arachnid_shield import ArachnidShield

BASE_URL = "https://shield.test/"


class Recorder:
    """Mock API server: records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_shield():
    """Build an ArachnidShield wired to a Recorder through httpx.MockTransport."""

    def _make(status_code: int = 200, body=None, **kwargs):
        server = Recorder(status_code, body)
        shield = ArachnidShield(
            "alice", "s3cret", BASE_URL, transport=httpx.MockTransport(server), **kwargs
        )
        return shield, server

    return _make


@pytest.fixture
def media_payload():
    """Factory for a ScannedMedia JSON body as the API returns it."""

    def _payload(classification="no-known-match", match_type=None, **extra):
        payload = {
            "sha1_base32": "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
            "sha256_hex": "ab" * 32,
            "classification": classification,
            "match_type": match_type,
            "size_bytes": 4,
            "near_match_details": [],
        }
        payload.update(extra)
        return payload

    return _payload
