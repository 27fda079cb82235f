"""LottieThis - Convert images to static Lottie animations."""

__version__ = "0.1.0"
__author__ = "LottieThis Team"
__description__ = "Wrap a raster image as a single-layer Lottie animation JSON file"

from .core.lottie import LottieEncoder, build_lottie_document
from .core.export import LottieExporter, export_filename, serialize_lottie
from .core.session import ConversionSession, ExportNotReadyError
from .utils.image import ImageAsset, NotAnImageError, load_image_asset

__all__ = [
    "LottieEncoder",
    "build_lottie_document",
    "LottieExporter",
    "export_filename",
    "serialize_lottie",
    "ConversionSession",
    "ExportNotReadyError",
    "ImageAsset",
    "NotAnImageError",
    "load_image_asset",
]
