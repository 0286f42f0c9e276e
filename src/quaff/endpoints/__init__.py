# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint descriptors."""

from .base import Endpoint

__all__ = ["Endpoint"]
