# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport base class: option merging, URI building and lifecycle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..config import TransportSettings, load_transport_settings
from ..endpoints import Endpoint
from ..http.url import build_uri
from ..responses import ResponseRegistry, default_registry
from ..utils.merge import merge_options

ACTION_READ = "read"
ACTION_EXISTS = "exists"
REQUEST_OPTIONS = "request_options"


class Transport(ABC):
    """
    Binds one Endpoint to one client for the duration of a session.

    The working option set is ``merge_options(headers(), auth(), native_options())``,
    keyed by action, each action holding its per-request options under
    ``REQUEST_OPTIONS``. Subclasses supply the three sources and the request methods.

    Instances hold no locks; use one transport per thread.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        options: Mapping[str, Any] | None = None,
        *,
        settings: TransportSettings | None = None,
        registry: ResponseRegistry | None = None,
    ):
        self.endpoint = endpoint
        self.settings = settings or load_transport_settings()
        self.registry = registry or default_registry()
        self.client_options: dict[str, Any] = dict(options or {})
        self._options = merge_options(self.headers(), self.auth(), self.native_options())

    @property
    def options(self) -> dict[str, Any]:
        return merge_options(self._options)

    def get_endpoint(self) -> Endpoint:
        return self.endpoint

    def headers(self) -> dict[str, Any]:
        return {}

    def auth(self) -> dict[str, Any]:
        return self.endpoint.auth() or {}

    def native_options(self) -> dict[str, Any]:
        return {}

    def query_params(self) -> dict[str, Any]:
        return self.endpoint.query_params()

    def uri(self, path: str | None, query_params: Mapping[str, Any] | None = None) -> str:
        return build_uri(self.endpoint.base_url, path, query_params)

    def request_options(self, action: str) -> dict[str, Any]:
        """Return a copy of the merged per-request options for an action."""
        action_options = self._options.get(action) or {}
        return merge_options(action_options.get(REQUEST_OPTIONS))

    @abstractmethod
    def get(self, path: str, query_params: Mapping[str, Any] | None = None):
        """Read ``path`` beneath the endpoint."""

    @abstractmethod
    def ping(self, uri: str):
        """Check that ``uri`` exists without reading its body."""

    def close(self) -> None:
        return None

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["ACTION_EXISTS", "ACTION_READ", "REQUEST_OPTIONS", "Transport"]
