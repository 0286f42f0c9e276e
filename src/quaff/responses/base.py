# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Success and error response wrappers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from email.message import Message
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..endpoints import Endpoint

RESULT_CODE = "ResultCode"
RESULT_MESSAGE = "ResultMessage"
CONTENT_TYPE = "ContentType"


def _charset(content_type: str) -> str:
    if not content_type:
        return "utf-8"
    message = Message()
    message["content-type"] = content_type
    return message.get_content_charset() or "utf-8"


@dataclass
class Response:
    """A completed exchange whose status code is in the OK set."""

    endpoint: Endpoint
    body: bytes = b""
    meta: dict[str, Any] = field(default_factory=dict)

    is_error = False

    @property
    def is_ok(self) -> bool:
        return not self.is_error

    @property
    def result_code(self) -> int | None:
        return self.meta.get(RESULT_CODE)

    @property
    def content_type(self) -> str:
        return self.meta.get(CONTENT_TYPE) or ""

    @property
    def text(self) -> str:
        try:
            return self.body.decode(_charset(self.content_type), errors="replace")
        except LookupError:
            return self.body.decode("utf-8", errors="replace")


@dataclass
class ErrorResponse(Response):
    """A completed exchange whose status code is outside the OK set."""

    is_error = True

    @property
    def result_message(self) -> str:
        return self.meta.get(RESULT_MESSAGE) or ""


class JsonMixin:
    body: bytes
    text: str

    def data(self) -> Any:
        """Decode the body as JSON; an empty body decodes to None."""
        if not self.body.strip():
            return None
        return json.loads(self.text)


@dataclass
class JsonResponse(JsonMixin, Response):
    pass


@dataclass
class JsonErrorResponse(JsonMixin, ErrorResponse):
    pass
