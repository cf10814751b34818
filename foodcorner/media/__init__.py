"""Mini README: Media helpers for the utilities screen.

Exports the asynchronous image loader used to fetch decorative pictures.
"""

from .image_loader import ImageLoader, ImageResult, decode_image, fetch_image

__all__ = ["ImageLoader", "ImageResult", "decode_image", "fetch_image"]
