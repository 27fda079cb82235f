"""Serialization and download artifacts for Lottie documents."""

import io
import json
import logging
from pathlib import Path, PureWindowsPath
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BASE_NAME = "image"
EXPORT_SUFFIX = "_lottie.json"
JSON_INDENT = 2


def export_filename(source_name: Optional[str] = None) -> str:
    """Name of the exported file for a source image name.

    ``photo.jpg`` becomes ``photo_lottie.json``; a missing name becomes
    ``image_lottie.json``. The base is everything before the first dot.
    """
    base = ""
    if source_name:
        # Browsers on Windows may send full paths with backslashes
        name = PureWindowsPath(source_name).name
        base = name.split(".")[0]
    return f"{base or DEFAULT_BASE_NAME}{EXPORT_SUFFIX}"


def serialize_lottie(document: Dict[str, Any]) -> str:
    """Pretty-print a document as 2-space indented JSON."""
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False)


def save_lottie(document: Dict[str, Any], output_path: Path) -> None:
    """Save document to file."""
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(serialize_lottie(document))

        logger.info(f"Lottie JSON saved successfully to {output_path}")

    except Exception as e:
        logger.error(f"Failed to save Lottie JSON to {output_path}: {e}")
        raise


class LottieExporter:
    """Turn documents into files on disk or in-memory downloads."""

    def __init__(self, output_dir: Path = Path(".")):
        self.output_dir = Path(output_dir)

    def output_path(self, source_name: Optional[str] = None) -> Path:
        return self.output_dir / export_filename(source_name)

    def save(self, document: Dict[str, Any], source_name: Optional[str] = None) -> Path:
        """Write the document as ``<base>_lottie.json`` in the output directory."""
        path = self.output_path(source_name)
        save_lottie(document, path)
        return path

    def to_download(self, document: Dict[str, Any], source_name: Optional[str] = None) -> Tuple[str, io.BytesIO]:
        """Build an in-memory attachment; the caller owns and closes the buffer."""
        buffer = io.BytesIO(serialize_lottie(document).encode("utf-8"))
        filename = export_filename(source_name)
        logger.debug(f"Prepared download {filename} ({len(buffer.getvalue()):,} bytes)")
        return filename, buffer
