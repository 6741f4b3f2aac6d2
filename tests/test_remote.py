from __future__ import annotations

import unittest

import httpx

from launchgate.remote.http import HTTPFetchSettings, HTTPRemoteFileManager


def _manager(handler) -> HTTPRemoteFileManager:
    settings = HTTPFetchSettings(url="https://www.example.com/example.json", timeout_seconds=5, user_agent="launchgate/test")
    return HTTPRemoteFileManager(settings, transport=httpx.MockTransport(handler))


class HTTPRemoteFileManagerTests(unittest.IsolatedAsyncioTestCase):
    async def test_passes_body_to_callback(self) -> None:
        seen_requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen_requests.append(request)
            return httpx.Response(200, content=b'{"ios": {}}')

        received: list[bytes] = []
        await _manager(handler).fetch_remote_file(received.append)

        self.assertEqual(received, [b'{"ios": {}}'])
        self.assertEqual(seen_requests[0].method, "GET")
        self.assertEqual(seen_requests[0].headers["User-Agent"], "launchgate/test")

    async def test_error_status_never_completes(self) -> None:
        received: list[bytes] = []
        await _manager(lambda request: httpx.Response(503)).fetch_remote_file(received.append)
        self.assertEqual(received, [])

    async def test_transport_error_never_completes(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        received: list[bytes] = []
        await _manager(handler).fetch_remote_file(received.append)
        self.assertEqual(received, [])
