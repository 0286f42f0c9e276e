# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from quaff.config import TransportSettings
from quaff.endpoints import Endpoint
from quaff.transports import HttpxTransport


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response factory."""

    def __init__(self, respond=None):
        self.requests: list[httpx.Request] = []
        self._respond = respond or (lambda request: httpx.Response(200, text="ok"))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)


@pytest.fixture
def settings():
    return TransportSettings(user_agent="QuaffTest/1.0")


@pytest.fixture
def endpoint():
    return Endpoint(base_url="http://api.example.test/v1", accept_type="application/json")


@pytest.fixture
def make_transport(settings):
    created: list[HttpxTransport] = []

    def _make(endpoint, respond=None, **kwargs):
        handler = RecordingHandler(respond)
        transport = HttpxTransport(endpoint, {"transport": httpx.MockTransport(handler)}, settings=settings, **kwargs)
        created.append(transport)
        return transport, handler

    yield _make
    for transport in created:
        transport.close()
