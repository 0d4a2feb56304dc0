from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image

from api.services.compositing import compose_pair, scale_to_width
from api.services.image_utils import load_jpeg
from api.services.metadata import ImageSource

DEFAULT_MARGIN = 10
DEFAULT_WIDTH = 640
DEFAULT_QUALITY = 75
OUTPUT_NAME = "output.jpg"


def compose_images(
	source1: ImageSource,
	source2: ImageSource,
	margin: int = DEFAULT_MARGIN,
	width: int = DEFAULT_WIDTH,
	vertical: bool = False,
) -> Image.Image:
	img1 = load_jpeg(source1)
	img2 = load_jpeg(source2)
	canvas = compose_pair(img1, img2, margin, vertical=vertical)
	return scale_to_width(canvas, width)


def save_jpeg(img: Image.Image, out: Union[str, Path, BinaryIO], quality: int = DEFAULT_QUALITY) -> Union[str, None]:
	"""
	Encode img as JPEG into a path (overwritten if present) or a binary stream.
	Returns the path as string, or None for streams.
	"""
	if img.mode != "RGB":
		img = img.convert("RGB")
	if isinstance(out, (str, Path)):
		out_path = Path(out)
		out_path.parent.mkdir(parents=True, exist_ok=True)
		img.save(out_path, format="JPEG", quality=quality)
		return str(out_path)
	img.save(out, format="JPEG", quality=quality)
	return None


def run_pipeline(
	path1: ImageSource,
	path2: ImageSource,
	out_path: Union[str, Path] = OUTPUT_NAME,
	margin: int = DEFAULT_MARGIN,
	width: int = DEFAULT_WIDTH,
	vertical: bool = False,
	quality: int = DEFAULT_QUALITY,
) -> str:
	canvas = compose_images(path1, path2, margin=margin, width=width, vertical=vertical)
	return save_jpeg(canvas, out_path, quality=quality)
