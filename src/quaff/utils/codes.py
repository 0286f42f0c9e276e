# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP status code sets and pattern matching.

Code sets are written as ints or three-character patterns where ``x`` matches
any digit, e.g. ``200``, ``"404"``, ``"20x"``, ``"5xx"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

STATUS_CODE_RANGE = range(100, 600)

CodePattern = int | str

_PATTERN_RE = re.compile(r"^[1-5x][0-9x]{2}$")


@lru_cache(maxsize=128)
def _compile(pattern: str) -> re.Pattern[str]:
    normalized = pattern.strip().lower()
    if not _PATTERN_RE.match(normalized):
        raise ValueError(f"Invalid status code pattern: {pattern!r}")
    return re.compile("^" + normalized.replace("x", "[0-9]") + "$")


def is_valid_pattern(pattern: CodePattern) -> bool:
    """Return True for an int status code or a well-formed three-character pattern."""
    if isinstance(pattern, int):
        return pattern in STATUS_CODE_RANGE
    return bool(_PATTERN_RE.match(str(pattern).strip().lower()))


def match_response_code(code: int | None, patterns: Iterable[CodePattern]) -> bool:
    """Return True when ``code`` matches any of the given codes or patterns."""
    if code is None:
        return False
    text = str(code)
    for pattern in patterns:
        if isinstance(pattern, int):
            if pattern == code:
                return True
        elif _compile(str(pattern)).match(text):
            return True
    return False


def expand_codes(patterns: Iterable[CodePattern]) -> frozenset[int]:
    """Expand codes and patterns into the concrete status codes they cover."""
    patterns = tuple(patterns)
    return frozenset(code for code in STATUS_CODE_RANGE if match_response_code(code, patterns))


@dataclass(frozen=True)
class ResponseCodes:
    """
    OK and error status code sets owned by a transport.

    "Not OK" is authoritative: a code in neither set is an error. The two sets
    must not overlap so ``is_ok`` and ``is_error`` can never both hold.
    """

    ok: frozenset[int]
    error: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        overlap = self.ok & self.error
        if overlap:
            raise ValueError(f"Status codes configured as both OK and error: {sorted(overlap)}")

    @classmethod
    def from_patterns(cls, ok: Iterable[CodePattern], error: Iterable[CodePattern] = ()) -> ResponseCodes:
        return cls(ok=expand_codes(ok), error=expand_codes(error))

    def is_ok(self, code: int | None) -> bool:
        return code is not None and code in self.ok

    def is_error(self, code: int | None) -> bool:
        return not self.is_ok(code)

    def is_declared_error(self, code: int | None) -> bool:
        """True only for codes explicitly listed in the error set."""
        return code is not None and code in self.error


__all__ = [
    "CodePattern",
    "ResponseCodes",
    "STATUS_CODE_RANGE",
    "expand_codes",
    "is_valid_pattern",
    "match_response_code",
]
