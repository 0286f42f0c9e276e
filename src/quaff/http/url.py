# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URI construction for endpoint requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

import httpx


def build_base_dir_url(base_url: str) -> str:
    """
    Convert an endpoint base URL into a "directory" URL suitable for relative joins.

    Example:
      https://host/api/v1 -> https://host/api/v1/
    """
    parsed = urlparse(str(base_url or ""))
    path = parsed.path.rstrip("/") + "/"
    return parsed._replace(path=path, params="", query="", fragment="").geturl()


def build_uri(base_url: str | None, path: str | None = None, params: Mapping[str, Any] | None = None) -> str:
    """
    Build a request URI from an endpoint base, a path and query parameters.

    Relative paths (with or without a leading slash) are resolved beneath the
    base path and keep the base URL's query; absolute URIs are used as-is.
    Query parameters are merged into any query already present, and None
    values are dropped.
    """
    raw_path = str(path or "")
    if raw_path and urlparse(raw_path).scheme:
        target = httpx.URL(raw_path)
    elif not base_url:
        raise httpx.InvalidURL(f"Cannot resolve relative URI {raw_path!r} without a base URL")
    elif raw_path:
        target = httpx.URL(build_base_dir_url(base_url)).join(raw_path.lstrip("/"))
        base_params = httpx.URL(str(base_url)).params
        if base_params:
            # The path's own query wins over the base query on a shared key.
            target = target.copy_with(params=base_params.merge(target.params))
    else:
        target = httpx.URL(str(base_url))

    query = {key: value for key, value in (params or {}).items() if value is not None}
    if query:
        target = target.copy_merge_params(query)
    return str(target)


__all__ = ["build_base_dir_url", "build_uri"]
