"""Image loading and data URL utilities."""

from PIL import Image, UnidentifiedImageError
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import base64
import io
import logging
import mimetypes

logger = logging.getLogger(__name__)

NOT_AN_IMAGE_MESSAGE = "Please select an image file"

# Embedded payloads are always labelled PNG, whatever the source format
DATA_URL_MIME_TYPE = "image/png"


class NotAnImageError(ValueError):
    """Raised when the selected file is not image-typed."""

    def __init__(self, filename: Optional[str] = None, mime_type: Optional[str] = None):
        super().__init__(NOT_AN_IMAGE_MESSAGE)
        self.filename = filename
        self.mime_type = mime_type


class ImageLoadError(RuntimeError):
    """Raised when an image-typed file cannot be decoded."""


@dataclass(frozen=True)
class ImageAsset:
    """A loaded image: natural pixel size plus its inline data URL."""

    width: int
    height: int
    data_url: str
    mime_type: str = "image/png"
    filename: Optional[str] = None

    def __post_init__(self):
        """Validate asset parameters."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid dimensions: {self.width}×{self.height}")

        if not self.data_url.startswith("data:"):
            raise ValueError("data_url must be a data: URL")

    @property
    def payload(self) -> str:
        """Base64 part of the data URL, without the MIME prefix."""
        return self.data_url.split(",", 1)[1]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (data URL omitted)."""
        return {
            "width": self.width,
            "height": self.height,
            "mime_type": self.mime_type,
            "filename": self.filename,
        }


def guess_mime_type(filename: Optional[str]) -> str:
    """Guess a MIME type from the file extension, empty string if unknown."""
    if not filename:
        return ""
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type:
        return mime_type

    # Hosts without a system mime.types miss newer formats such as .webp
    image_format = Image.registered_extensions().get(Path(filename).suffix.lower())
    return Image.MIME.get(image_format, "") if image_format else ""


def is_image_type(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.lower().startswith("image/")


def build_data_url(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URL."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


class ImageLoader:
    """Read an image file into an ImageAsset."""

    def __init__(self, data: bytes, filename: Optional[str] = None, mime_type: Optional[str] = None):
        self.data = data
        self.filename = filename
        self.mime_type = (mime_type or guess_mime_type(filename)).lower()
        self._validate_type()

    @classmethod
    def from_path(cls, path: Path) -> "ImageLoader":
        """Create a loader for a file on disk."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image file not found: {path}")

        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")

        # Reject on type before reading the whole file
        if not is_image_type(guess_mime_type(path.name)):
            raise NotAnImageError(path.name, guess_mime_type(path.name))

        return cls(path.read_bytes(), filename=path.name)

    def _validate_type(self) -> None:
        """Validate the input is image-typed."""
        if not is_image_type(self.mime_type):
            logger.debug(f"Rejected {self.filename!r} with type {self.mime_type!r}")
            raise NotAnImageError(self.filename, self.mime_type)

    def read_dimensions(self) -> tuple:
        """Return the natural (width, height) of the decoded image."""
        try:
            with Image.open(io.BytesIO(self.data)) as img:
                logger.debug(f"Loaded image: {img.format} {img.mode} {img.size}")
                img.verify()
                width, height = img.size
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
            raise ImageLoadError(f"Failed to load image {self.filename or '<upload>'}: {e}")

        if width <= 0 or height <= 0:
            raise ImageLoadError(f"Image has no pixels: {width}×{height}")

        return width, height

    def load(self) -> ImageAsset:
        """Decode the image and build its asset."""
        width, height = self.read_dimensions()
        asset = ImageAsset(
            width=width,
            height=height,
            data_url=build_data_url(self.data, DATA_URL_MIME_TYPE),
            mime_type=self.mime_type,
            filename=self.filename,
        )
        logger.debug(f"Built data URL for {self.filename}: {len(asset.data_url):,} chars")
        return asset


def load_image_asset(path: Path) -> ImageAsset:
    """Convenience function to load an image file from disk."""
    return ImageLoader.from_path(path).load()


def load_image_bytes(data: bytes, filename: Optional[str] = None, mime_type: Optional[str] = None) -> ImageAsset:
    """Convenience function to load an uploaded image."""
    return ImageLoader(data, filename=filename, mime_type=mime_type).load()


def get_image_info(path: Path) -> dict:
    """Get basic information about an image without building a data URL."""
    try:
        with Image.open(path) as img:
            return {
                "format": img.format,
                "mode": img.mode,
                "size": img.size,
                "width": img.width,
                "height": img.height,
                "has_transparency": img.mode in ("RGBA", "LA")
                or "transparency" in img.info,
                "is_animated": getattr(img, "is_animated", False),
                "n_frames": getattr(img, "n_frames", 1),
                "mime_type": guess_mime_type(Path(path).name) or Image.MIME.get(img.format, ""),
            }
    except Exception as e:
        raise RuntimeError(f"Failed to get image info for {path}: {e}")
