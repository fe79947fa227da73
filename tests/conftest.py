# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

import contextlib
import socket
import typing

import pytest
from aiohttp import web


def probe_port() -> int:
    s = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    s.bind(("127.0.0.1", 0))
    port = typing.cast(int, s.getsockname()[1])
    # This is a race condition, but should be good enough for test environments
    s.close()
    return port


@contextlib.asynccontextmanager
async def serve(
    routes: typing.List[web.RouteDef], port: int
) -> typing.AsyncIterator[str]:
    app = web.Application()
    app.add_routes(routes)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture
def port() -> int:
    return probe_port()
