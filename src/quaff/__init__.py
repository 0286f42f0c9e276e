# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Quaff HTTP transport.

Translates endpoint reads and existence checks into httpx requests and turns
the resulting HTTP responses into typed response objects. Response types are
chosen by the endpoint through a registry, and transport-level failures are
raised as a single TransportError.
"""

from .config import TransportSettings, load_transport_settings
from .endpoints import Endpoint
from .errors import ErrorCategory, QuaffError, TransportError, UnknownResponseClass
from .log import TRACE, setup_logging
from .responses import (
    ErrorResponse,
    JsonErrorResponse,
    JsonResponse,
    Response,
    ResponseRegistry,
    default_registry,
)
from .transports import (
    ACTION_EXISTS,
    ACTION_READ,
    HttpProtocol,
    HttpxTransport,
    PingResult,
    Transport,
)
from .utils import ResponseCodes, merge_options
from .version import __version__

__all__ = [
    "ACTION_EXISTS",
    "ACTION_READ",
    "Endpoint",
    "ErrorCategory",
    "ErrorResponse",
    "HttpProtocol",
    "HttpxTransport",
    "JsonErrorResponse",
    "JsonResponse",
    "PingResult",
    "QuaffError",
    "Response",
    "ResponseCodes",
    "ResponseRegistry",
    "TRACE",
    "Transport",
    "TransportError",
    "TransportSettings",
    "UnknownResponseClass",
    "default_registry",
    "load_transport_settings",
    "merge_options",
    "setup_logging",
    "__version__",
]
