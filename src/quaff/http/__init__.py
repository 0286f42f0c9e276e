# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP helpers."""

from .url import build_base_dir_url, build_uri

__all__ = ["build_base_dir_url", "build_uri"]
