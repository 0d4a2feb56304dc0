from __future__ import annotations

from io import BytesIO

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.responses import Response
from fastapi.concurrency import run_in_threadpool

from api.services.compose_pipeline import (
	DEFAULT_MARGIN,
	DEFAULT_QUALITY,
	DEFAULT_WIDTH,
	compose_images,
	save_jpeg,
)


router = APIRouter(prefix="/pipeline", tags=["compose"])


def _compose_to_jpeg(data1: bytes, data2: bytes, margin: int, width: int, vertical: bool, quality: int) -> bytes:
	canvas = compose_images(data1, data2, margin=margin, width=width, vertical=vertical)
	buf = BytesIO()
	save_jpeg(canvas, buf, quality=quality)
	return buf.getvalue()


@router.post(
	"/compose",
	summary="Compose two uploaded JPEGs into one side-by-side JPEG",
	response_class=Response,
	responses={200: {"content": {"image/jpeg": {}}}},
)
async def compose(
	image1: UploadFile = File(...),
	image2: UploadFile = File(...),
	margin: int = Form(DEFAULT_MARGIN, ge=0),
	width: int = Form(DEFAULT_WIDTH, ge=1),
	vertical: bool = Form(False),
	quality: int = Form(DEFAULT_QUALITY, ge=1, le=95),
):
	data1 = await image1.read()
	data2 = await image2.read()
	# decode, resample and encode run in the threadpool
	try:
		body = await run_in_threadpool(_compose_to_jpeg, data1, data2, margin, width, vertical, quality)
	except (OSError, ValueError) as e:
		raise HTTPException(status_code=400, detail=f"could not compose images: {e}")
	return Response(content=body, media_type="image/jpeg")


@router.get("/health", summary="Liveness check")
def health():
	return {"status": "ok"}
