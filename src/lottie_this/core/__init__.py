"""Core processing modules for LottieThis."""

from .lottie import LottieEncoder, build_lottie_document, validate_lottie_structure
from .export import LottieExporter, export_filename, save_lottie, serialize_lottie
from .session import ConversionSession, ExportNotReadyError, SessionState

__all__ = [
    "LottieEncoder",
    "build_lottie_document",
    "validate_lottie_structure",
    "LottieExporter",
    "export_filename",
    "save_lottie",
    "serialize_lottie",
    "ConversionSession",
    "ExportNotReadyError",
    "SessionState",
]
