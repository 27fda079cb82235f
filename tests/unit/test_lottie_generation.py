"""Unit tests for Lottie document generation."""

import json

import pytest

from lottie_this.core.lottie import (
    FRAME_RATE,
    IMAGE_ASSET_ID,
    LOTTIE_VERSION,
    OUT_POINT,
    LottieEncoder,
    build_lottie_document,
    validate_lottie_structure,
)
from lottie_this.utils.image import ImageAsset

DATA_URL = "data:image/png;base64,iVBORw0KGgo="


class TestBuildLottieDocument:

    def test_header_fields(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        assert doc["v"] == "5.7.4"
        assert doc["fr"] == 30
        assert doc["ip"] == 0
        assert doc["op"] == 60
        assert doc["w"] == 100
        assert doc["h"] == 200
        assert doc["nm"] == "Static Image Animation"
        assert doc["ddd"] == 0

    def test_constants(self):
        assert LOTTIE_VERSION == "5.7.4"
        assert FRAME_RATE == 30
        assert OUT_POINT == 60

    def test_single_embedded_asset(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        assert doc["assets"] == [
            {"id": "image_0", "w": 100, "h": 200, "u": "", "p": DATA_URL, "e": 1}
        ]

    def test_single_image_layer(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        assert len(doc["layers"]) == 1

        layer = doc["layers"][0]
        assert layer["ty"] == 2
        assert layer["ind"] == 1
        assert layer["nm"] == "Image Layer"
        assert layer["refId"] == IMAGE_ASSET_ID
        assert layer["ip"] == 0
        assert layer["op"] == 60
        assert layer["st"] == 0
        assert layer["ao"] == 0
        assert layer["bm"] == 0
        assert layer["ddd"] == 0
        assert "tm" not in layer

    def test_static_transform(self):
        layer = build_lottie_document(100, 200, DATA_URL)["layers"][0]
        ks = layer["ks"]
        assert ks["o"] == {"a": 0, "k": 100}
        assert ks["r"] == {"a": 0, "k": 0}
        assert ks["s"] == {"a": 0, "k": [100, 100, 100]}
        assert ks["p"] == {"a": 0, "k": [50, 100, 0]}
        assert ks["a"] == {"a": 0, "k": [50, 100, 0]}

    def test_center_of_even_size_is_int(self):
        ks = build_lottie_document(100, 200, DATA_URL)["layers"][0]["ks"]
        assert all(isinstance(v, int) for v in ks["p"]["k"])
        assert "50.0" not in json.dumps(ks)

    def test_center_of_odd_size(self):
        ks = build_lottie_document(101, 33, DATA_URL)["layers"][0]["ks"]
        assert ks["p"]["k"] == [50.5, 16.5, 0]
        assert ks["a"]["k"] == [50.5, 16.5, 0]

    def test_one_pixel_image(self):
        doc = build_lottie_document(1, 1, DATA_URL)
        assert doc["layers"][0]["ks"]["a"]["k"] == [0.5, 0.5, 0]

    @pytest.mark.parametrize("width,height", [(1920, 1080), (7, 9), (4096, 3)])
    def test_canvas_matches_and_layer_centered(self, width, height):
        doc = build_lottie_document(width, height, DATA_URL)
        assert (doc["w"], doc["h"]) == (width, height)
        ks = doc["layers"][0]["ks"]
        assert ks["a"]["k"] == [width / 2, height / 2, 0]
        assert ks["p"]["k"] == ks["a"]["k"]

    def test_anchor_and_position_are_independent_lists(self):
        ks = build_lottie_document(10, 10, DATA_URL)["layers"][0]["ks"]
        assert ks["a"]["k"] is not ks["p"]["k"]

    def test_deterministic(self):
        assert build_lottie_document(64, 48, DATA_URL) == build_lottie_document(64, 48, DATA_URL)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, -1), (1.5, 10), (True, 10), ("10", 10)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ValueError, match="must be a positive integer"):
            build_lottie_document(width, height, DATA_URL)

    def test_empty_payload(self):
        with pytest.raises(ValueError, match="payload"):
            build_lottie_document(10, 10, "")


class TestValidateLottieStructure:

    def test_valid_document(self):
        assert validate_lottie_structure(build_lottie_document(100, 200, DATA_URL))

    def test_missing_key(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        del doc["layers"]
        assert not validate_lottie_structure(doc)

    def test_extra_layer(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        doc["layers"].append(dict(doc["layers"][0]))
        assert not validate_lottie_structure(doc)

    def test_wrong_reference(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        doc["layers"][0]["refId"] = "image_1"
        assert not validate_lottie_structure(doc)

    def test_off_center_layer(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        doc["layers"][0]["ks"]["p"]["k"] = [0, 0, 0]
        assert not validate_lottie_structure(doc)

    def test_malformed_layer(self):
        doc = build_lottie_document(100, 200, DATA_URL)
        doc["layers"][0] = {"refId": IMAGE_ASSET_ID}
        assert not validate_lottie_structure(doc)


class TestLottieEncoder:

    def test_encode_asset(self):
        asset = ImageAsset(width=100, height=200, data_url=DATA_URL)
        doc = LottieEncoder().encode(asset)
        assert doc == build_lottie_document(100, 200, DATA_URL)

    def test_document_info(self):
        encoder = LottieEncoder()
        doc = encoder.encode(ImageAsset(width=640, height=480, data_url=DATA_URL))
        info = encoder.get_document_info(doc)
        assert info["width"] == 640
        assert info["height"] == 480
        assert info["frames"] == 60
        assert info["frame_rate"] == 30
        assert info["duration_seconds"] == 2.0
        assert info["asset_count"] == 1
        assert info["layer_count"] == 1
        assert info["version"] == "5.7.4"
