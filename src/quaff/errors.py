# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    INVALID_URL = "INVALID_URL"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class QuaffError(Exception):
    """Base class for errors raised by Quaff."""


class TransportError(QuaffError):
    """
    Raised when a request could not be completed at the transport level.

    The original exception is chained as ``__cause__``; ``code`` carries the numeric
    code of the underlying failure (errno, HTTP status) or 0 when none is known.
    """

    def __init__(self, message: str, code: int = 0, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category

    @classmethod
    def wrap(cls, exc: BaseException) -> TransportError:
        """Build a TransportError from any client exception; the caller chains it with ``from``."""
        return cls(str(exc), code=exception_code(exc), category=categorize_exception(exc))

    def __repr__(self) -> str:
        return f"TransportError({self.message!r}, code={self.code}, category={self.category.value})"


class UnknownResponseClass(QuaffError, KeyError):
    """Raised when an endpoint names a response class that was never registered."""

    def __str__(self) -> str:
        return f"No response class registered as {self.args[0]!r}"


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def exception_code(exc: BaseException) -> int:
    """Return the first numeric code found on the exception or its causes."""
    for item in _exception_chain(exc):
        response = getattr(item, "response", None)
        status = getattr(response, "status_code", None) if response is not None else None
        if isinstance(status, int):
            return status
        errno = getattr(item, "errno", None)
        if isinstance(errno, int):
            return errno
        code = getattr(item, "code", None)
        if isinstance(code, int):
            return code
    return 0


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    for item in _exception_chain(exc):
        if isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(item, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.DecodingError)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ErrorCategory",
    "QuaffError",
    "TransportError",
    "UnknownResponseClass",
    "categorize_exception",
    "exception_code",
]
