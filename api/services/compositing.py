from __future__ import annotations

from PIL import Image

from api.services.image_utils import check_canvas_size, fit_within, resize_to


def compose_pair(img1: Image.Image, img2: Image.Image, margin: int, vertical: bool = False) -> Image.Image:
	"""
	Paste two images onto one canvas separated by margin pixels.
	Horizontal: both are scaled to the smaller height, img2 goes right of img1.
	Vertical: both are scaled to the smaller width, img2 goes below img1.
	The canvas takes img1's mode; the margin stays black.
	"""
	if margin < 0:
		raise ValueError(f"margin must be >= 0, got {margin}")
	if vertical:
		canvas_w = min(img1.width, img2.width)
		img1 = resize_to(img1, fit_within(img1.size, (canvas_w, img1.height)))
		img2 = resize_to(img2, fit_within(img2.size, (canvas_w, img2.height)))
		size = (canvas_w, img1.height + img2.height + margin)
		offset = (0, img1.height + margin)
	else:
		canvas_h = min(img1.height, img2.height)
		img1 = resize_to(img1, fit_within(img1.size, (img1.width, canvas_h)))
		img2 = resize_to(img2, fit_within(img2.size, (img2.width, canvas_h)))
		size = (img1.width + img2.width + margin, canvas_h)
		offset = (img1.width + margin, 0)

	check_canvas_size(size)
	canvas = Image.new(img1.mode, size)
	if img2.mode != canvas.mode:
		img2 = img2.convert(canvas.mode)
	canvas.paste(img1, (0, 0))
	canvas.paste(img2, offset)
	return canvas


def scale_to_width(img: Image.Image, width: int) -> Image.Image:
	# only the width is fixed; height follows the aspect ratio
	if width < 1:
		raise ValueError(f"width must be >= 1, got {width}")
	size = fit_within(img.size, (width, None))
	check_canvas_size(size)
	return resize_to(img, size)
