# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed transport."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from ..config import DEFAULT_ERROR_CODES, DEFAULT_OK_CODES, TransportSettings
from ..endpoints import Endpoint
from ..errors import TransportError
from ..log import TRACE
from ..responses import CONTENT_TYPE, RESULT_CODE, RESULT_MESSAGE, Response, ResponseRegistry, default_registry
from ..utils.codes import ResponseCodes
from .base import ACTION_EXISTS, ACTION_READ, REQUEST_OPTIONS, Transport
from .http import HttpProtocol

logger = logging.getLogger(__name__)

# Per-request keyword arguments accepted by httpx.Client.request.
_REQUEST_KEYS = ("headers", "cookies", "auth", "follow_redirects", "timeout", "extensions")


@dataclass(frozen=True)
class PingResult:
    response: Response
    status_code: int

    @property
    def exists(self) -> bool:
        return not self.response.is_error


class HttpxTransport(HttpProtocol, Transport):
    """
    Synchronous transport issuing GET/HEAD requests through an owned httpx.Client.

    ``options`` are httpx.Client keyword arguments (``timeout``, ``verify``,
    ``transport``, ...) and configure the client itself. Accept, User-Agent and
    endpoint auth are applied per request from the merged option set.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        options: Mapping[str, Any] | None = None,
        *,
        settings: TransportSettings | None = None,
        registry: ResponseRegistry | None = None,
        client: httpx.Client | None = None,
    ):
        super().__init__(endpoint, options, settings=settings, registry=registry)
        # Fail on a bad OK/error configuration before any request goes out.
        self.response_codes  # noqa: B018
        self.client = client or httpx.Client(**self._client_kwargs())

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs = dict(self.client_options)
        kwargs.setdefault("timeout", self.settings.timeout)
        kwargs.setdefault("follow_redirects", self.settings.allow_redirects)
        kwargs.setdefault("verify", self.settings.verify_ssl)
        return kwargs

    def headers(self) -> dict[str, Any]:
        accept = {REQUEST_OPTIONS: {"headers": {"Accept": self.endpoint.get_accept_type()}}}
        return {
            ACTION_READ: accept,
            ACTION_EXISTS: accept,
        }

    def _request_kwargs(self, action: str) -> dict[str, Any]:
        options = self.request_options(action)
        return {key: options[key] for key in _REQUEST_KEYS if key in options}

    def get(self, path: str, query_params: Mapping[str, Any] | None = None) -> Response:
        """
        GET ``path`` beneath the endpoint and classify the response.

        Caller ``query_params`` are layered over the endpoint's default query
        parameters. Raises TransportError when no HTTP response was received.
        """
        try:
            uri = self.uri(path, {**self.query_params(), **(query_params or {})})
            logger.debug("sync GET %s", uri)
            response = self.client.get(uri, **self._request_kwargs(ACTION_READ))
        except Exception as exc:  # noqa: BLE001
            raise TransportError.wrap(exc) from exc

        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, "%s %s body: %s", response.status_code, uri, response.text)
        return self.make_response(self.get_endpoint(), response, codes=self.response_codes, registry=self.registry)

    def ping(self, uri: str) -> PingResult:
        """
        HEAD ``uri`` to check that the resource exists without transferring the body.

        Relative URIs resolve beneath the endpoint base. The raw status code is
        returned alongside the classified response.
        """
        try:
            target = self.uri(uri)
            logger.debug("ping HEAD %s", target)
            response = self.client.head(target, **self._request_kwargs(ACTION_EXISTS))
        except Exception as exc:  # noqa: BLE001
            raise TransportError.wrap(exc) from exc

        classified = self.make_response(self.get_endpoint(), response, codes=self.response_codes, registry=self.registry)
        return PingResult(response=classified, status_code=response.status_code)

    @classmethod
    def make_response(
        cls,
        endpoint: Endpoint,
        response: httpx.Response,
        *,
        codes: ResponseCodes | None = None,
        registry: ResponseRegistry | None = None,
    ) -> Response:
        """
        Decode an httpx.Response into the endpoint's response or error response type.

        Classification depends only on whether the status code is in the OK set.
        """
        codes = codes or ResponseCodes.from_patterns(DEFAULT_OK_CODES, DEFAULT_ERROR_CODES)
        registry = registry or default_registry()
        content_type = response.headers.get("Content-Type", "")

        if not codes.is_ok(response.status_code):
            return registry.create(
                endpoint.get_error_class(),
                endpoint,
                response.content,
                {
                    RESULT_CODE: response.status_code,
                    RESULT_MESSAGE: response.reason_phrase,
                    CONTENT_TYPE: content_type,
                },
            )
        return registry.create(
            endpoint.get_response_class(),
            endpoint,
            response.content,
            {
                RESULT_CODE: response.status_code,
                CONTENT_TYPE: content_type,
            },
        )

    def close(self) -> None:
        self.client.close()


__all__ = ["HttpxTransport", "PingResult"]
