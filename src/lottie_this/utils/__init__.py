"""Utility modules for LottieThis."""

from .image import (
    ImageAsset,
    ImageLoadError,
    ImageLoader,
    NotAnImageError,
    build_data_url,
    get_image_info,
    load_image_asset,
    load_image_bytes,
)

__all__ = [
    "ImageAsset",
    "ImageLoadError",
    "ImageLoader",
    "NotAnImageError",
    "build_data_url",
    "get_image_info",
    "load_image_asset",
    "load_image_bytes",
]
