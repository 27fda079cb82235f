"""Lottie document generation for a single static image layer."""

import logging
from numbers import Integral
from typing import Any, Dict, List, Union

from ..utils.image import ImageAsset

logger = logging.getLogger(__name__)

LOTTIE_VERSION = "5.7.4"
FRAME_RATE = 30
IN_POINT = 0
OUT_POINT = 60  # 2 seconds at 30fps
DOCUMENT_NAME = "Static Image Animation"
LAYER_NAME = "Image Layer"
IMAGE_ASSET_ID = "image_0"
IMAGE_LAYER_TYPE = 2

Number = Union[int, float]


def _half(value: int) -> Number:
    """Halve a pixel size, keeping whole results as ints (100 -> 50, 101 -> 50.5)."""
    half = value / 2
    return int(half) if half.is_integer() else half


def _static(value: Any) -> Dict[str, Any]:
    """Non-animated transform property."""
    return {"a": 0, "k": value}


def _check_dimension(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def build_lottie_document(width: int, height: int, data_url: str) -> Dict[str, Any]:
    """Build the fixed-template Lottie document embedding one image.

    The document is a 60 frame, 30fps clip with one image asset and one
    image layer. The layer is fully opaque, unrotated, unscaled and has both
    its anchor and position at the image center, so the image is drawn
    exactly over the canvas for the whole clip.

    Args:
        width: Natural image width in pixels, also the canvas width.
        height: Natural image height in pixels, also the canvas height.
        data_url: MIME-prefixed base64 payload embedded in the asset.

    Returns:
        The document as a plain dict ready for ``json`` serialization.
    """
    _check_dimension("width", width)
    _check_dimension("height", height)
    if not data_url:
        raise ValueError("Image payload must not be empty")

    width, height = int(width), int(height)
    center = [_half(width), _half(height), 0]

    return {
        "v": LOTTIE_VERSION,
        "fr": FRAME_RATE,
        "ip": IN_POINT,
        "op": OUT_POINT,
        "w": width,
        "h": height,
        "nm": DOCUMENT_NAME,
        "ddd": 0,
        "assets": [
            {
                "id": IMAGE_ASSET_ID,
                "w": width,
                "h": height,
                "u": "",
                "p": data_url,
                "e": 1,
            }
        ],
        "layers": [
            {
                "ddd": 0,
                "ind": 1,
                "ty": IMAGE_LAYER_TYPE,
                "nm": LAYER_NAME,
                "refId": IMAGE_ASSET_ID,
                "ks": {
                    "o": _static(100),
                    "r": _static(0),
                    "p": _static(list(center)),
                    "a": _static(list(center)),
                    "s": _static([100, 100, 100]),
                },
                "ao": 0,
                "ip": IN_POINT,
                "op": OUT_POINT,
                "st": 0,
                "bm": 0,
            }
        ],
    }


def validate_lottie_structure(document: Dict[str, Any]) -> bool:
    """Perform basic validation of the fixed-template document shape."""
    try:
        required_keys = ["v", "fr", "ip", "op", "w", "h", "assets", "layers"]
        for key in required_keys:
            if key not in document:
                logger.error(f"Missing required Lottie key: {key}")
                return False

        assets: List[dict] = document["assets"]
        layers: List[dict] = document["layers"]
        if len(assets) != 1 or len(layers) != 1:
            logger.error(f"Expected one asset and one layer, got {len(assets)} and {len(layers)}")
            return False

        asset, layer = assets[0], layers[0]
        if layer.get("refId") != asset.get("id"):
            logger.error(f"Layer references {layer.get('refId')!r}, asset is {asset.get('id')!r}")
            return False

        if (asset.get("w"), asset.get("h")) != (document["w"], document["h"]):
            logger.error("Asset size does not match canvas size")
            return False

        center = [_half(document["w"]), _half(document["h"]), 0]
        transform = layer["ks"]
        if transform["a"]["k"] != center or transform["p"]["k"] != center:
            logger.error(f"Layer is not centered at {center}")
            return False

        return True

    except (KeyError, TypeError, AttributeError) as e:
        logger.error(f"Lottie validation error: {e}")
        return False


class LottieEncoder:
    """Encode loaded images as static Lottie documents."""

    def encode(self, asset: ImageAsset) -> Dict[str, Any]:
        """Generate the document for an image asset."""
        document = build_lottie_document(asset.width, asset.height, asset.data_url)

        if not validate_lottie_structure(document):
            logger.error("Generated Lottie document failed basic validation")
            raise ValueError("Invalid Lottie structure generated")

        logger.info(f"Generated Lottie document {asset.width}×{asset.height}, "
                    f"{OUT_POINT - IN_POINT} frames @ {FRAME_RATE}fps")
        return document

    def get_document_info(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """Get summary information about a generated document."""
        frames = document["op"] - document["ip"]
        return {
            "version": document["v"],
            "width": document["w"],
            "height": document["h"],
            "frame_rate": document["fr"],
            "frames": frames,
            "duration_seconds": frames / document["fr"],
            "asset_count": len(document["assets"]),
            "layer_count": len(document["layers"]),
        }
