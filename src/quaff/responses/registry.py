# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Registry resolving endpoint response identifiers to response factories."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import UnknownResponseClass
from .base import ErrorResponse, JsonErrorResponse, JsonResponse, Response

if TYPE_CHECKING:
    from ..endpoints import Endpoint

ResponseFactory = Callable[["Endpoint", bytes, dict[str, Any]], Response]

RESPONSE = "response"
ERROR_RESPONSE = "error"
JSON_RESPONSE = "json"
JSON_ERROR_RESPONSE = "json-error"


class ResponseRegistry:
    """Maps response class identifiers to callables taking (endpoint, body, meta)."""

    def __init__(self, factories: Mapping[str, ResponseFactory] | None = None):
        self._factories: dict[str, ResponseFactory] = dict(factories or {})

    def register(self, identifier: str, factory: ResponseFactory) -> None:
        self._factories[identifier] = factory

    def unregister(self, identifier: str) -> None:
        self._factories.pop(identifier, None)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def create(self, identifier: str, endpoint: Endpoint, body: bytes, meta: dict[str, Any]) -> Response:
        try:
            factory = self._factories[identifier]
        except KeyError:
            raise UnknownResponseClass(identifier) from None
        return factory(endpoint, body, meta)

    def copy(self) -> ResponseRegistry:
        return ResponseRegistry(self._factories)


def default_registry() -> ResponseRegistry:
    """Return a fresh registry holding the built-in response types."""
    return ResponseRegistry(
        {
            RESPONSE: Response,
            ERROR_RESPONSE: ErrorResponse,
            JSON_RESPONSE: JsonResponse,
            JSON_ERROR_RESPONSE: JsonErrorResponse,
        }
    )


__all__ = [
    "ERROR_RESPONSE",
    "JSON_ERROR_RESPONSE",
    "JSON_RESPONSE",
    "RESPONSE",
    "ResponseFactory",
    "ResponseRegistry",
    "default_registry",
]
