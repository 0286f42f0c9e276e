# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for Quaff."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("QUAFF_LOG_LEVEL", "WARNING").upper()

# Below DEBUG: raw response bodies are only emitted when explicitly requested.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _resolve_level(name: str) -> int:
    if name == "TRACE":
        return TRACE
    return getattr(logging, name, logging.WARNING)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=_resolve_level(effective_level),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["TRACE", "setup_logging"]
