import asyncio
import base64

import httpx
import pytest

from arachnid_shield import ArachnidShield, DEFAULT_BASE_URL
from arachnid_shield.domain.errors import ConfigurationError


def test_defaults_to_production_base_url():
    shield = ArachnidShield("alice", "s3cret")
    assert shield.configuration.base_url == DEFAULT_BASE_URL


def test_auth_header_built_once_at_construction():
    shield = ArachnidShield("alice", "s3cret")
    expected = "Basic " + base64.b64encode(b"alice:s3cret").decode()
    assert shield.headers == {"Authorization": expected}


def test_bad_base_url_raises_at_construction():
    with pytest.raises(ConfigurationError):
        ArachnidShield("alice", "s3cret", "shield.example")


@pytest.mark.asyncio
async def test_same_auth_header_on_every_request(make_shield, media_payload):
    shield, server = make_shield(body=media_payload())
    header = shield.headers["Authorization"]

    await shield.scan_media_from_bytes(b"a", "image/png")
    await shield.scan_media_from_url("https://example.com/x.png")

    assert [r.headers["Authorization"] for r in server.requests] == [header, header]


def test_instance_reusable_across_event_loops(make_shield, media_payload):
    shield, server = make_shield(body=media_payload("csam", "exact"))

    first = asyncio.run(shield.scan_media_from_url("https://example.com/1.png"))
    second = asyncio.run(shield.scan_media_from_url("https://example.com/2.png"))

    assert first.ok and second.ok
    assert second.data.is_match is True
    assert len(server.requests) == 2
    assert shield._http_client is None


@pytest.mark.asyncio
async def test_concurrent_scans_are_independent(make_shield, media_payload):
    shield, server = make_shield(body=media_payload("harmful-abusive-material", "near"))

    results = await asyncio.gather(
        shield.scan_media_from_bytes(b"a", "image/png", 1),
        shield.scan_media_from_url("https://example.com/x.png"),
        shield.scan_pdq_hashes(["h1"]),
    )

    media, url, pdq = results
    assert media.ok and media.data.is_match is True
    assert url.ok and url.data.is_match is True
    # the canned media body has no scanned_hashes; PDQ parses to an empty mapping
    assert pdq.ok and pdq.data.scanned_hashes == {}
    paths = sorted(r.url.path for r in server.requests)
    assert paths == ["/v1/media/", "/v1/pdq/", "/v1/url/"]


@pytest.mark.asyncio
async def test_injected_client_is_shared_and_left_open(media_payload):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=media_payload())

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    shield = ArachnidShield("alice", "s3cret", "https://shield.test/", http_client=http)

    await shield.scan_media_from_bytes(b"a", "image/png")
    await shield.scan_media_from_bytes(b"b", "image/png")

    assert len(seen) == 2
    assert not http.is_closed
    await http.aclose()
