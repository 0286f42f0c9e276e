# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transports binding endpoints to HTTP clients."""

from .base import ACTION_EXISTS, ACTION_READ, REQUEST_OPTIONS, Transport
from .http import HttpProtocol
from .httpx_transport import HttpxTransport, PingResult

__all__ = [
    "ACTION_EXISTS",
    "ACTION_READ",
    "HttpProtocol",
    "HttpxTransport",
    "PingResult",
    "REQUEST_OPTIONS",
    "Transport",
]
