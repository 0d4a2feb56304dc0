from __future__ import annotations

import struct
from pathlib import Path
from typing import Any, Optional, Union

import piexif  # relies on pyproject.toml

ImageSource = Union[str, Path, bytes]

DEFAULT_ORIENTATION = 1
JPEG_SOI = b"\xff\xd8"


def _to_int_safe(v: Any) -> Optional[int]:
	if v is None:
		return None
	if isinstance(v, bool):
		return None
	if isinstance(v, int):
		return v
	if isinstance(v, (list, tuple)) and v:
		return _to_int_safe(v[0])
	if isinstance(v, bytes):
		s = v.decode("utf-8", errors="ignore").strip()
		return int(s) if s.isdigit() else None
	try:
		return int(v)
	except (TypeError, ValueError):
		return None


def read_source_bytes(source: ImageSource) -> bytes:
	if isinstance(source, bytes):
		return source
	with Path(source).open("rb") as f:
		return f.read()


def _load_exif(data: bytes) -> dict:
	# piexif falls back to treating unknown data as a filename, so check the SOI marker first
	if data[:2] != JPEG_SOI:
		raise ValueError("not a JPEG file")
	try:
		return piexif.load(data)
	except piexif.InvalidImageDataError as e:
		raise ValueError(f"not a JPEG file: {e}") from e
	except (struct.error, KeyError, IndexError, ValueError):
		# damaged APP1 segment: treat as "no orientation"
		return {}


def read_orientation(source: ImageSource) -> int:
	"""
	Return the EXIF Orientation (1..8) of the primary image in a JPEG.
	Falls back to 1 when the tag is missing, out of range or unreadable.
	Raises OSError if the file cannot be opened and ValueError if the
	container is not something piexif can parse.
	"""
	exif = _load_exif(read_source_bytes(source))
	zeroth = exif.get("0th") or {}
	o = _to_int_safe(zeroth.get(piexif.ImageIFD.Orientation))
	if o is None or not 1 <= o <= 8:
		return DEFAULT_ORIENTATION
	return o
