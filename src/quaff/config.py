# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for Quaff transports."""

import os
from dataclasses import dataclass

from .utils.codes import expand_codes, is_valid_pattern
from .version import __version__

DEFAULT_USER_AGENT = f"Quaff/{__version__} (+https://github.com/quaff-sync/quaff)"
DEFAULT_OK_CODES = ("2xx",)
DEFAULT_ERROR_CODES = ("4xx", "5xx")


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _codes_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    parts = tuple(part.strip() for part in value.split(",") if part.strip())
    if not parts or not all(is_valid_pattern(part) for part in parts):
        return default
    return parts


@dataclass
class TransportSettings:
    """Transport defaults shared by every endpoint session."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    ok_codes: tuple[str, ...] = DEFAULT_OK_CODES
    error_codes: tuple[str, ...] = DEFAULT_ERROR_CODES

    @classmethod
    def from_env(cls) -> "TransportSettings":
        """Create settings from environment variables (evaluated at call time)."""
        ok_codes = _codes_env("QUAFF_RESPONSE_OK_CODES", DEFAULT_OK_CODES)
        error_codes = _codes_env("QUAFF_RESPONSE_ERROR_CODES", DEFAULT_ERROR_CODES)
        if expand_codes(ok_codes) & expand_codes(error_codes):
            ok_codes, error_codes = DEFAULT_OK_CODES, DEFAULT_ERROR_CODES
        return cls(
            timeout=_float_env("QUAFF_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("QUAFF_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("QUAFF_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("QUAFF_HTTP_VERIFY_SSL", cls.verify_ssl),
            ok_codes=ok_codes,
            error_codes=error_codes,
        )


def load_transport_settings() -> TransportSettings:
    """Load transport settings from environment with sensible defaults."""
    return TransportSettings.from_env()
