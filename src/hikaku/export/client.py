from __future__ import annotations

import json
import urllib.request
from typing import Any

from hikaku.constants import DEFAULT_TIMEOUT_SECONDS


def build_request(url: str, access_token: str) -> urllib.request.Request:
    return urllib.request.Request(
        url=url,
        method="GET",
        headers={
            "Accept": "application/json",
            "Authorization": f"Bearer {access_token}",
        },
    )


def fetch_json(url: str, access_token: str, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> Any:
    """GET ``url`` with a bearer token and decode the body as untyped JSON.

    ``urllib.error.HTTPError`` (non-2xx), ``urllib.error.URLError``, and
    ``json.JSONDecodeError`` propagate to the caller.
    """
    request = build_request(url, access_token)
    with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
        body = response.read()
    return json.loads(body.decode("utf-8"))


__all__ = ["build_request", "fetch_json"]
