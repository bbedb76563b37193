"""HTTP utilities package.

Builds the ``httpx.AsyncClient`` a ``DeepseekClient`` owns.
"""

from .client import auth_headers, build_timeout, configure_httpx_client, create_httpx_client

__all__ = ["auth_headers", "build_timeout", "configure_httpx_client", "create_httpx_client"]
