# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP protocol defaults shared by HTTP transports."""

from __future__ import annotations

from functools import cached_property
from typing import Any

from ..config import TransportSettings
from ..utils.codes import ResponseCodes
from .base import ACTION_EXISTS, ACTION_READ, REQUEST_OPTIONS


class HttpProtocol:
    """Mixin providing native HTTP options and status code decoding."""

    settings: TransportSettings

    def native_options(self) -> dict[str, Any]:
        request_options = {"headers": {"User-Agent": self.settings.user_agent}}
        return {
            ACTION_READ: {REQUEST_OPTIONS: request_options},
            ACTION_EXISTS: {REQUEST_OPTIONS: request_options},
        }

    @cached_property
    def response_codes(self) -> ResponseCodes:
        return ResponseCodes.from_patterns(self.settings.ok_codes, self.settings.error_codes)

    def response_decode_ok(self) -> frozenset[int]:
        return self.response_codes.ok

    def response_decode_error(self) -> frozenset[int]:
        return self.response_codes.error

    def is_ok(self, code: int | None) -> bool:
        return self.response_codes.is_ok(code)

    def is_error(self, code: int | None) -> bool:
        return self.response_codes.is_error(code)


__all__ = ["HttpProtocol"]
