from __future__ import annotations

import math
from io import BytesIO
from typing import Optional, Tuple

from PIL import Image

from api.services.metadata import ImageSource, read_orientation, read_source_bytes


def _has_alpha(img: Image.Image) -> bool:
	return img.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in img.info


def _restore_channels(img: Image.Image, alpha: bool) -> Image.Image:
	mode = "RGBA" if alpha else "RGB"
	if img.mode != mode:
		img = img.convert(mode)
	return img


def apply_exif_orientation(img: Image.Image, orientation: int) -> Image.Image:
	alpha = _has_alpha(img)
	o = orientation
	if o == 2:
		img = img.transpose(Image.FLIP_LEFT_RIGHT)
	elif o == 3:
		img = img.rotate(180, expand=True)
	elif o == 4:
		img = img.transpose(Image.FLIP_TOP_BOTTOM)
	elif o == 5:
		img = img.transpose(Image.FLIP_LEFT_RIGHT).rotate(90, expand=True)
	elif o == 6:
		img = img.rotate(270, expand=True)
	elif o == 7:
		img = img.transpose(Image.FLIP_LEFT_RIGHT).rotate(270, expand=True)
	elif o == 8:
		img = img.rotate(90, expand=True)
	return _restore_channels(img, alpha)


def load_jpeg(source: ImageSource) -> Image.Image:
	"""
	Decode a JPEG from a path or raw bytes and turn it upright using its EXIF orientation.
	"""
	data = read_source_bytes(source)
	orientation = read_orientation(data)
	img = Image.open(BytesIO(data))
	if img.format != "JPEG":
		raise ValueError(f"expected a JPEG image, got {img.format}")
	img.load()
	return apply_exif_orientation(img, orientation)


def fit_within(size: Tuple[int, int], box: Tuple[int, Optional[int]]) -> Tuple[int, int]:
	"""
	Scale (w, h) by a single ratio so it fits inside box. A box height of None leaves the height unconstrained.
	"""
	w, h = size
	box_w, box_h = box
	ratio = box_w / float(w)
	if box_h is not None:
		ratio = min(ratio, box_h / float(h))
	# halves round up
	return (max(1, int(math.floor(w * ratio + 0.5))), max(1, int(math.floor(h * ratio + 0.5))))


def resize_to(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
	if img.size == size:
		return img
	return img.resize(size, Image.LANCZOS)


def check_canvas_size(size: Tuple[int, int]) -> None:
	limit = Image.MAX_IMAGE_PIXELS
	if limit and size[0] * size[1] > limit:
		raise ValueError(f"output of {size[0]}x{size[1]} pixels exceeds the limit of {limit} pixels")
