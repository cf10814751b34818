"""Mini README: Asynchronous fetch-and-decode for decorative images.

Structure:
    * ImageResult - outcome of one fetch (dimensions or an error message).
    * fetch_image - download a URL with httpx and decode it with OpenCV.
    * ImageLoader - per-view handle that runs the fetch as a cancellable task.

Images are purely decorative: every failure is reported as a result value so
a slow or broken image can never interfere with the ledger. No cache is kept;
each view owns its loader and cancels it when it is torn down.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import cv2
import httpx
import numpy as np

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PLACEHOLDER_TEXT = "Loading..."


@dataclass(slots=True)
class ImageResult:
    """Decoded image metadata or the reason decoding failed."""

    url: str
    width: int = 0
    height: int = 0
    channels: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict:
        return {
            "url": self.url,
            "ok": self.ok,
            "width": self.width,
            "height": self.height,
            "channels": self.channels,
            "error": self.error,
        }


def decode_image(url: str, payload: bytes) -> ImageResult:
    """Decode raw bytes into an image and report its shape."""

    buffer = np.frombuffer(payload, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
    if image is None:
        return ImageResult(url=url, error="Payload is not a decodable image")
    height, width = image.shape[:2]
    channels = image.shape[2] if image.ndim == 3 else 1
    return ImageResult(url=url, width=int(width), height=int(height), channels=int(channels))


async def fetch_image(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0,
) -> ImageResult:
    """Download and decode ``url``; transport and decode failures are returned, not raised."""

    owns_client = client is None
    http = client or httpx.AsyncClient(follow_redirects=True)
    try:
        response = await http.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as error:
        LOGGER.warning("Image fetch failed for %s: %s", url, error)
        return ImageResult(url=url, error=str(error) or error.__class__.__name__)
    finally:
        if owns_client:
            await http.aclose()
    result = decode_image(url, response.content)
    if result.ok:
        LOGGER.debug("Decoded image %s (%sx%s)", url, result.width, result.height)
    else:
        LOGGER.warning("Image decode failed for %s", url)
    return result


class ImageLoader:
    """Run one image fetch in the background on behalf of a view."""

    def __init__(
        self,
        url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
    ) -> None:
        self.url = url
        self._client = client
        self._timeout = timeout
        self._task: Optional[asyncio.Task] = None

    def start(self) -> "asyncio.Task[ImageResult]":
        """Schedule the fetch on the running loop; repeated calls reuse the task."""

        if self._task is None:
            self._task = asyncio.create_task(
                fetch_image(self.url, client=self._client, timeout=self._timeout)
            )
        return self._task

    @property
    def state(self) -> str:
        if self._task is None or not self._task.done():
            return "loading"
        if self._task.cancelled():
            return "cancelled"
        return "loaded" if self._task.result().ok else "failed"

    @property
    def placeholder(self) -> Optional[str]:
        """Text shown while the image is pending."""

        return PLACEHOLDER_TEXT if self.state == "loading" else None

    @property
    def result(self) -> Optional[ImageResult]:
        if self._task is None or not self._task.done() or self._task.cancelled():
            return None
        return self._task.result()

    def cancel(self) -> None:
        """Tear down a pending fetch when the owning view disappears."""

        if self._task is not None and not self._task.done():
            self._task.cancel()
            LOGGER.debug("Cancelled image fetch for %s", self.url)

    async def wait(self) -> Optional[ImageResult]:
        """Await completion, returning ``None`` if the fetch was cancelled."""

        task = self.start()
        try:
            return await task
        except asyncio.CancelledError:
            if task.cancelled():
                return None
            raise
