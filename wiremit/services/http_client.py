from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib; the only outbound call is the rates feed GET. One attempt
per call: every transport, status or decoding failure surfaces as HttpError.
"""
import http.client
import json
import logging
import urllib.request
from typing import Any

logger = logging.getLogger("wiremit.http")


class HttpError(Exception):
    pass


def get_json(url: str, *, timeout: float = 5.0) -> Any:
    req = urllib.request.Request(url, headers={"Accept": "application/json"})
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:  # nosec B310
            if resp.status >= 400:
                raise HttpError(f"HTTP {resp.status} for {url}")
            data = resp.read()
            return json.loads(data.decode("utf-8"))
    # OSError covers URLError, timeouts and connection resets; HTTPException
    # covers IncompleteRead; ValueError covers JSON / UTF-8 decoding
    except (OSError, http.client.HTTPException, ValueError) as e:
        logger.debug("GET %s failed: %s", url, e)
        raise HttpError(f"Failed to fetch JSON from {url}: {e}") from e
