"""
resolver.py — one-shot IP geolocation for the default location.

Resolution chain (runs once at startup, no retries):
  1. IP echo endpoint        (body is the caller's public IP)
  2. Geolocation-by-IP       (GET <base>/<ip>, JSON with country/region/city/timezone)

Never raises: on any failure the caller gets an empty placeholder
location with ``available=False`` and the typed error attached, so the
REPL keeps running with an "unknown location".
"""

from dataclasses import dataclass, field

import requests

import config
from parser.errors import ResolverDecodeFailure, ResolverTransportFailure, WethError
from state import LocationRecord


@dataclass
class LocationLookup:
    """Outcome of the startup location lookup."""
    location: LocationRecord = field(default_factory=LocationRecord)
    available: bool = False         # False if either lookup failed
    error: WethError | None = None  # ResolverTransportFailure | ResolverDecodeFailure
    ip_address: str = ""


def _get(url: str, stage: str, timeout: float) -> requests.Response:
    headers = {"User-Agent": config.USER_AGENT}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ResolverTransportFailure(stage, str(e)) from e
    return resp


# ---------------------------------------------------------------------------
# Step 1 — public IP
# ---------------------------------------------------------------------------

def fetch_ip_address(url: str | None = None, timeout: float | None = None) -> str:
    """Return the caller's public IP as reported by the echo endpoint."""
    resp = _get(url or config.IP_ECHO_URL, "ip", timeout or config.HTTP_TIMEOUT)
    ip_address = resp.text.strip()
    if not ip_address:
        raise ResolverDecodeFailure("empty IP address response")
    return ip_address


# ---------------------------------------------------------------------------
# Step 2 — geolocation for that IP
# ---------------------------------------------------------------------------

def fetch_geolocation(
    ip_address: str,
    base_url: str | None = None,
    timeout: float | None = None,
) -> LocationRecord:
    """Look up *ip_address* and decode the JSON body into a LocationRecord."""
    base = (base_url or config.GEOLOCATION_URL).rstrip("/")
    resp = _get(f"{base}/{ip_address}", "geolocation", timeout or config.HTTP_TIMEOUT)

    try:
        payload = resp.json()
    except ValueError as e:
        raise ResolverDecodeFailure(str(e)) from e

    if not isinstance(payload, dict):
        raise ResolverDecodeFailure(f"expected a JSON object, got {type(payload).__name__}")

    # ip-api.com answers 200 with {"status": "fail", "message": ...} for bad IPs
    if payload.get("status") == "fail":
        raise ResolverDecodeFailure(payload.get("message", "lookup failed"))

    return LocationRecord.from_json(payload)


# ---------------------------------------------------------------------------
# Public API — resolve_location()
# ---------------------------------------------------------------------------

def resolve_location(
    ip_url: str | None = None,
    geo_url: str | None = None,
    timeout: float | None = None,
) -> LocationLookup:
    """
    Find the default location from the caller's IP address.

    Returns LocationLookup:
        location    LocationRecord (empty when unavailable)
        available   bool
        error       the WethError that stopped the chain, if any
        ip_address  str (empty if step 1 failed)
    """
    ip_address = ""
    try:
        ip_address = fetch_ip_address(ip_url, timeout)
        location = fetch_geolocation(ip_address, geo_url, timeout)
    except WethError as e:
        print(f"[RESOLVER] {e.message}")
        return LocationLookup(error=e, ip_address=ip_address)

    print(
        f"[RESOLVER] {ip_address} → {location.city} {location.region}, "
        f"{location.country} [{location.timezone or 'no timezone'}]"
    )
    return LocationLookup(location=location, available=True, ip_address=ip_address)
