"""HTTP client construction for the deepspeak transport.

Purpose:
    Build and configure the ``httpx.AsyncClient`` owned by a
    ``DeepseekClient``: base URL, bearer credential, JSON headers and
    timeouts all come from here so the facade never assembles them inline.

External dependencies:
    - ``httpx`` for the asynchronous HTTP client and connection pool.

Lifecycle & cleanup:
    - The facade owns the client and releases it with ``aclose``; this module
      keeps no global pool.
    - ``configure_httpx_client`` applies the same settings to a caller-supplied
      client (for example one built on ``httpx.MockTransport`` in tests).
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def build_timeout(seconds: Optional[float] = None) -> httpx.Timeout:
    """Return an ``httpx.Timeout`` applying ``seconds`` to every phase.

    ``None`` uses :func:`get_timeout_config`.
    """
    if seconds is None:
        seconds = get_timeout_config().http_timeout_seconds
    return httpx.Timeout(seconds)


def auth_headers(api_key: str) -> dict[str, str]:
    """Headers sent on every call: bearer credential plus JSON negotiation."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Accept": "application/json",
    }


def configure_httpx_client(
    client: httpx.AsyncClient,
    *,
    base_url: str,
    api_key: str,
    timeout_seconds: Optional[float] = None,
) -> httpx.AsyncClient:
    """Point an existing client at ``base_url`` with auth and timeout applied."""
    client.base_url = base_url
    client.headers.update(auth_headers(api_key))
    client.timeout = build_timeout(timeout_seconds)
    return client


def create_httpx_client(
    *,
    base_url: str,
    api_key: str,
    timeout_seconds: Optional[float] = None,
) -> httpx.AsyncClient:
    """Create a new ``httpx.AsyncClient`` configured for the DeepSeek API."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers=auth_headers(api_key),
        timeout=build_timeout(timeout_seconds),
    )


__all__ = ["build_timeout", "auth_headers", "configure_httpx_client", "create_httpx_client"]
