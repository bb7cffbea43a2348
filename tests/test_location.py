#!/usr/bin/env python3
"""
Tests for the setloc / loc commands and the startup location resolver.

Resolver tests patch requests.get, so nothing here touches the network
unless --live is passed.

Usage:
    python -m tests.test_location           # offline tests
    python -m tests.test_location --live    # also query the real endpoints
"""

import sys
from unittest.mock import patch

import requests

from parser.errors import ResolverDecodeFailure, ResolverTransportFailure
from parser.location_parser import (
    format_location,
    get_location,
    parse_location_update,
    set_location,
)
from resolver import LocationLookup, resolve_location
from state import LocationRecord
from tests.harness import PARIS, make_state, run, section

IP_URL = "https://ip.example.test"
GEO_URL = "https://geo.example.test/json/"


def _response(body: str, status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


def _resolve(*responses) -> tuple[LocationLookup, list]:
    """Run resolve_location against canned responses (or exceptions)."""
    with patch("resolver.requests.get", side_effect=list(responses)) as fake_get:
        lookup = resolve_location(ip_url=IP_URL, geo_url=GEO_URL, timeout=2)
    return lookup, fake_get.call_args_list


# ---------------------------------------------------------------------------
# 1. Location mutator
# ---------------------------------------------------------------------------
def test_location_update():
    section("TEST: Location Updates")

    result = parse_location_update(["*", "*", "Canada"], PARIS)
    assert (result.city, result.region, result.country) == ("Paris", "IDF", "Canada")
    assert result.timezone == "Europe/Paris"

    result = parse_location_update(["Lyon"], PARIS)
    assert (result.city, result.region, result.country) == ("Lyon", "IDF", "France")

    # extra tokens ignored, no validation of names
    result = parse_location_update(["Nowhere", "XX", "Atlantis", "extra"], PARIS)
    assert (result.city, result.region, result.country) == ("Nowhere", "XX", "Atlantis")

    # empty strings are valid values
    result = parse_location_update(["", "*"], PARIS)
    assert result.city == ""
    print("  PASS")


def test_setloc_command():
    section("TEST: setloc / loc")

    state = make_state()
    assert get_location(state, []) == "Location: Paris IDF, France"
    assert set_location(state, ["*", "*", "Canada"]) == "Location: Paris IDF, Canada"
    assert set_location(state, ["Toronto", "ON"]) == "Location: Toronto ON, Canada"
    assert state.default_location == PARIS

    # reset restores the default exactly
    assert set_location(state, []) == "Location: Paris IDF, France"
    assert state.location == PARIS
    assert format_location(LocationRecord()) == "Location:  , "
    print("  PASS")


# ---------------------------------------------------------------------------
# 2. Resolver (mocked HTTP)
# ---------------------------------------------------------------------------
def test_resolver_success():
    section("TEST: Resolver Success (mocked)")

    lookup, calls = _resolve(
        _response("203.0.113.7\n"),
        _response(
            '{"status": "success", "country": "Canada", "region": "ON",'
            ' "regionName": "Ontario", "city": "Toronto", "timezone": "America/Toronto"}'
        ),
    )
    assert lookup.available
    assert lookup.error is None
    assert lookup.ip_address == "203.0.113.7"
    assert lookup.location == LocationRecord(
        country="Canada", region="ON", city="Toronto", timezone="America/Toronto"
    )

    assert calls[0].args[0] == IP_URL
    # surrounding whitespace is stripped before building the second URL
    assert calls[1].args[0] == "https://geo.example.test/json/203.0.113.7"
    assert all(call.kwargs["timeout"] == 2 for call in calls)
    print("  PASS")


def test_resolver_missing_keys():
    section("TEST: Resolver Partial Payload (mocked)")

    lookup, _ = _resolve(_response("198.51.100.1"), _response('{"country": "Peru"}'))
    assert lookup.available
    assert lookup.location == LocationRecord(country="Peru")
    print("  PASS")


def test_resolver_transport_failures():
    section("TEST: Resolver Transport Failures (mocked)")

    lookup, calls = _resolve(requests.ConnectionError("no route to host"))
    assert not lookup.available
    assert isinstance(lookup.error, ResolverTransportFailure)
    assert lookup.error.stage == "ip"
    assert lookup.location == LocationRecord()
    assert len(calls) == 1

    lookup, _ = _resolve(_response("203.0.113.7"), requests.Timeout("read timed out"))
    assert not lookup.available
    assert lookup.error.stage == "geolocation"
    assert lookup.ip_address == "203.0.113.7"
    assert lookup.location.is_unknown

    lookup, _ = _resolve(_response("203.0.113.7"), _response("oops", status=503))
    assert isinstance(lookup.error, ResolverTransportFailure)
    assert lookup.error.stage == "geolocation"
    print("  PASS")


def test_resolver_decode_failures():
    section("TEST: Resolver Decode Failures (mocked)")

    lookup, calls = _resolve(_response("   "))
    assert isinstance(lookup.error, ResolverDecodeFailure)
    assert len(calls) == 1

    lookup, _ = _resolve(_response("203.0.113.7"), _response("<html>not json</html>"))
    assert isinstance(lookup.error, ResolverDecodeFailure)
    assert not lookup.available

    lookup, _ = _resolve(_response("203.0.113.7"), _response('["a", "list"]'))
    assert isinstance(lookup.error, ResolverDecodeFailure)

    lookup, _ = _resolve(
        _response("10.0.0.1"),
        _response('{"status": "fail", "message": "private range", "query": "10.0.0.1"}'),
    )
    assert isinstance(lookup.error, ResolverDecodeFailure)
    assert lookup.error.detail == "private range"
    assert lookup.location == LocationRecord()
    print("  PASS")


# ---------------------------------------------------------------------------
# 3. Live lookup (only with --live)
# ---------------------------------------------------------------------------
def live_resolver():
    section("LIVE: Resolver against the configured endpoints")
    lookup = resolve_location()
    print(f"  Available: {lookup.available}")
    print(f"  IP:        {lookup.ip_address}")
    print(f"  {format_location(lookup.location)}")
    assert lookup.available, f"live lookup failed: {lookup.error}"
    print("  PASS")


def main():
    tests = [
        ("Location Updates", test_location_update),
        ("setloc", test_setloc_command),
        ("Resolver Success", test_resolver_success),
        ("Resolver Partial", test_resolver_missing_keys),
        ("Resolver Transport", test_resolver_transport_failures),
        ("Resolver Decode", test_resolver_decode_failures),
    ]
    if "--live" in sys.argv[1:]:
        tests.append(("Live Resolver", live_resolver))
    run(tests)


if __name__ == "__main__":
    main()
