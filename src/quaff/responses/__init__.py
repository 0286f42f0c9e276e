# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response types produced by transports."""

from .base import (
    CONTENT_TYPE,
    RESULT_CODE,
    RESULT_MESSAGE,
    ErrorResponse,
    JsonErrorResponse,
    JsonResponse,
    Response,
)
from .registry import (
    ERROR_RESPONSE,
    JSON_ERROR_RESPONSE,
    JSON_RESPONSE,
    RESPONSE,
    ResponseFactory,
    ResponseRegistry,
    default_registry,
)

__all__ = [
    "CONTENT_TYPE",
    "ERROR_RESPONSE",
    "ErrorResponse",
    "JSON_ERROR_RESPONSE",
    "JSON_RESPONSE",
    "JsonErrorResponse",
    "JsonResponse",
    "RESPONSE",
    "RESULT_CODE",
    "RESULT_MESSAGE",
    "Response",
    "ResponseFactory",
    "ResponseRegistry",
    "default_registry",
]
