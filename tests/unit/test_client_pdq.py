import pytest

from arachnid_shield import Err, Ok
from arachnid_shield.domain.models import MediaClassification


@pytest.mark.asyncio
async def test_scan_pdq_returns_mapping_unchanged(make_shield):
    body = {
        "scanned_hashes": {
            "abc": {
                "classification": "no-known-match",
                "match_type": None,
                "near_match_details": None,
            }
        }
    }
    shield, server = make_shield(body=body)

    result = await shield.scan_pdq_hashes(["abc"])

    assert isinstance(result, Ok)
    assert result.status == "ok"
    match = result.data.scanned_hashes["abc"]
    assert match.classification is MediaClassification.NO_KNOWN_MATCH
    assert not hasattr(match, "is_match")
    assert result.data.model_dump(mode="json") == body

    assert str(server.last.url) == "https://shield.test/v1/pdq/"
    assert server.last.headers["Content-Type"] == "application/json; charset=utf-8"
    assert server.last_json() == {"hashes": ["abc"]}


@pytest.mark.asyncio
async def test_scan_pdq_near_match_flag_not_derived(make_shield):
    body = {
        "scanned_hashes": {
            "h1": {
                "classification": "csam",
                "match_type": "near",
                "near_match_details": {
                    "sha1_base32": "S" * 32,
                    "sha256_hex": "ef" * 32,
                    "classification": "csam",
                    "timestamp": 0,
                },
            }
        }
    }
    shield, _ = make_shield(body=body)
    result = await shield.scan_pdq_hashes(["h1"])
    assert result.ok
    assert result.data.scanned_hashes["h1"].near_match_details.is_match is None


@pytest.mark.asyncio
async def test_scan_pdq_error(make_shield):
    shield, _ = make_shield(status_code=401, body={"detail": "Invalid credentials"})
    assert await shield.scan_pdq_hashes(["abc"]) == Err("Invalid credentials")


@pytest.mark.asyncio
async def test_scan_pdq_rejects_single_string(make_shield):
    shield, server = make_shield()

    result = await shield.scan_pdq_hashes("abc")  # type: ignore[arg-type]

    assert isinstance(result, Err)
    assert "list" in result.data
    assert server.requests == []


@pytest.mark.asyncio
async def test_scan_pdq_non_string_hash_is_an_error(make_shield):
    shield, server = make_shield()

    result = await shield.scan_pdq_hashes(["abc", 123])  # type: ignore[list-item]

    assert isinstance(result, Err)
    assert result.error is not None
    assert server.requests == []
