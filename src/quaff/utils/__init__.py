# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared helpers for option merging and status-code matching."""

from .codes import ResponseCodes, expand_codes, match_response_code
from .merge import merge_options

__all__ = [
    "ResponseCodes",
    "expand_codes",
    "match_response_code",
    "merge_options",
]
