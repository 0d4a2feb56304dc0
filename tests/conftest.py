"""Shared fixtures: small JPEGs written to tmp_path, optionally tagged with an EXIF orientation."""

from io import BytesIO
from pathlib import Path

import piexif
import pytest
from PIL import Image


def encode_jpeg(size, color=(200, 30, 30), orientation=None) -> bytes:
    img = Image.new("RGB", size, color)
    kwargs = {}
    if orientation is not None:
        kwargs["exif"] = piexif.dump({"0th": {piexif.ImageIFD.Orientation: orientation}})
    buf = BytesIO()
    img.save(buf, format="JPEG", quality=95, **kwargs)
    return buf.getvalue()


@pytest.fixture
def jpeg_bytes():
    """Encode a solid-colour JPEG in memory."""
    return encode_jpeg


@pytest.fixture
def make_jpeg(tmp_path):
    """Write a solid-colour JPEG and return its path."""

    def _make(name, size, color=(200, 30, 30), orientation=None) -> Path:
        path = tmp_path / name
        path.write_bytes(encode_jpeg(size, color=color, orientation=orientation))
        return path

    return _make


@pytest.fixture
def png_file(tmp_path) -> Path:
    path = tmp_path / "not_a_jpeg.png"
    Image.new("RGB", (8, 8), (0, 255, 0)).save(path, format="PNG")
    return path
