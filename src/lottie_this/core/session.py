"""Current-image slot and export readiness."""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from ..utils.image import ImageAsset, load_image_asset, load_image_bytes
from .export import LottieExporter
from .lottie import LottieEncoder

logger = logging.getLogger(__name__)

EXPORT_NOT_READY_MESSAGE = "Please upload an image first"


class ExportNotReadyError(RuntimeError):
    """Raised when an export is attempted before an image is loaded."""

    def __init__(self):
        super().__init__(EXPORT_NOT_READY_MESSAGE)


class SessionState(Enum):
    IDLE = "idle"
    # Pillow reads the size while loading, so a session never rests here
    IMAGE_LOADED = "image_loaded"
    READY = "ready"


class ConversionSession:
    """Hold one loaded image and turn it into a Lottie export.

    A successful load replaces the previous image; a rejected load leaves
    it untouched.
    """

    def __init__(self, encoder: Optional[LottieEncoder] = None):
        self.encoder = encoder or LottieEncoder()
        self._asset: Optional[ImageAsset] = None

    @property
    def asset(self) -> Optional[ImageAsset]:
        return self._asset

    @property
    def dimensions(self) -> Optional[tuple]:
        if self._asset is None:
            return None
        return self._asset.width, self._asset.height

    @property
    def state(self) -> SessionState:
        if self._asset is None:
            return SessionState.IDLE
        return SessionState.READY

    @property
    def can_export(self) -> bool:
        return self.state is SessionState.READY

    def select_file(self, path: Path) -> ImageAsset:
        """Load an image from disk into the slot."""
        return self._replace(load_image_asset(path))

    def select_upload(self, data: bytes, filename: Optional[str] = None, mime_type: Optional[str] = None) -> ImageAsset:
        """Load uploaded bytes into the slot."""
        return self._replace(load_image_bytes(data, filename=filename, mime_type=mime_type))

    def _replace(self, asset: ImageAsset) -> ImageAsset:
        previous = self._asset
        self._asset = asset
        if previous is not None:
            logger.debug(f"Replaced {previous.filename} with {asset.filename}")
        logger.info(f"Image loaded: {asset.filename} {asset.width}×{asset.height}")
        return asset

    def build_document(self) -> Dict[str, Any]:
        """Encode the current image."""
        if not self.can_export:
            raise ExportNotReadyError()
        return self.encoder.encode(self._asset)

    def export(self, output_dir: Path = Path(".")) -> Path:
        """Encode the current image and save it as ``<base>_lottie.json``."""
        document = self.build_document()
        return LottieExporter(output_dir).save(document, self._asset.filename)

    def reset(self) -> None:
        self._asset = None
