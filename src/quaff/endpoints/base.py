# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint descriptor consumed by transports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..responses.registry import ERROR_RESPONSE, RESPONSE


@dataclass(frozen=True)
class Endpoint:
    """
    Describes a remote resource a transport talks to.

    ``response_class`` and ``error_class`` are identifiers looked up in the
    transport's ResponseRegistry, so the endpoint decides which concrete
    response types are produced.

    ``auth_options`` is merged into the transport option set as-is, keyed by
    action like the rest of the options, e.g.::

        {ACTION_READ: {"request_options": {"auth": ("user", "secret")}}}
    """

    base_url: str
    accept_type: str = "application/json"
    response_class: str = RESPONSE
    error_class: str = ERROR_RESPONSE
    auth_options: Mapping[str, Any] | None = None
    query: Mapping[str, Any] = field(default_factory=dict)

    def get_accept_type(self) -> str:
        return self.accept_type

    def get_response_class(self) -> str:
        return self.response_class

    def get_error_class(self) -> str:
        return self.error_class

    def auth(self) -> dict[str, Any]:
        return dict(self.auth_options or {})

    def query_params(self) -> dict[str, Any]:
        """Default query parameters sent with every read."""
        return dict(self.query)
