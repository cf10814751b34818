"""Mini README: Tests for the decorative image loader.

Requests are served by ``httpx.MockTransport`` so no network is touched.
Coroutines are driven with ``asyncio.run``.
"""

from __future__ import annotations

import asyncio

import cv2
import httpx
import numpy as np

from foodcorner.media import ImageLoader, decode_image, fetch_image


def _png_bytes(width: int = 6, height: int = 4) -> bytes:
    success, buffer = cv2.imencode(".png", np.zeros((height, width, 3), dtype=np.uint8))
    assert success
    return buffer.tobytes()


def _transport() -> httpx.MockTransport:
    png = _png_bytes()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/good.png":
            return httpx.Response(200, content=png)
        if request.url.path == "/text.png":
            return httpx.Response(200, content=b"not an image")
        return httpx.Response(404)

    return httpx.MockTransport(handler)


def test_decode_image_reports_shape() -> None:
    result = decode_image("memory://", _png_bytes(width=8, height=5))

    assert result.ok
    assert (result.width, result.height, result.channels) == (8, 5, 3)


def test_fetch_image_success_and_failures() -> None:
    """Good payloads decode; HTTP errors and garbage come back as failed results."""

    async def scenario():
        async with httpx.AsyncClient(transport=_transport()) as client:
            return await asyncio.gather(
                fetch_image("https://images.test/good.png", client=client),
                fetch_image("https://images.test/text.png", client=client),
                fetch_image("https://images.test/missing.png", client=client),
            )

    good, garbage, missing = asyncio.run(scenario())

    assert good.ok and good.width == 6
    assert not garbage.ok
    assert not missing.ok
    assert "404" in (missing.error or "")


def test_loader_transitions_from_loading_to_loaded() -> None:
    async def scenario():
        async with httpx.AsyncClient(transport=_transport()) as client:
            loader = ImageLoader("https://images.test/good.png", client=client)
            assert loader.state == "loading"
            assert loader.placeholder == "Loading..."
            result = await loader.wait()
            return loader, result

    loader, result = asyncio.run(scenario())

    assert result is not None and result.ok
    assert loader.state == "loaded"
    assert loader.placeholder is None
    assert loader.result is result


def test_loader_cancel_tears_down_pending_fetch() -> None:
    """Cancelling a slow fetch leaves the loader cancelled without a result."""

    async def slow(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(30)
        return httpx.Response(200, content=b"")

    async def scenario():
        async with httpx.AsyncClient(transport=httpx.MockTransport(slow)) as client:
            loader = ImageLoader("https://images.test/slow.png", client=client)
            loader.start()
            await asyncio.sleep(0)
            assert loader.state == "loading"
            loader.cancel()
            result = await loader.wait()
            return loader, result

    loader, result = asyncio.run(scenario())

    assert result is None
    assert loader.state == "cancelled"
    assert loader.result is None
