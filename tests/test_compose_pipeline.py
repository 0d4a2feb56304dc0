from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from api.services.compose_pipeline import OUTPUT_NAME, compose_images, run_pipeline, save_jpeg


def test_run_pipeline_writes_output_jpg_in_cwd(make_jpeg, tmp_path, monkeypatch):
    a = make_jpeg("a.jpg", (400, 300))
    b = make_jpeg("b.jpg", (400, 300), color=(0, 0, 200))
    monkeypatch.chdir(tmp_path)

    out = run_pipeline(a, b)

    assert out == OUTPUT_NAME
    with Image.open(tmp_path / OUTPUT_NAME) as img:
        assert img.format == "JPEG"
        # (400 + 400 + 10) x 300 scaled to width 640
        assert img.size == (640, round(300 * 640 / 810))


def test_run_pipeline_overwrites_existing_file(make_jpeg, tmp_path):
    a = make_jpeg("a.jpg", (100, 100))
    target = tmp_path / "out" / "result.jpg"
    target.parent.mkdir()
    target.write_bytes(b"stale")

    run_pipeline(a, a, out_path=target, width=50)

    with Image.open(target) as img:
        assert img.size == (50, 24)


def test_orientation_is_applied_before_compositing(make_jpeg):
    # 40x20 tagged 6 becomes 20x40, so both inputs share a 40px height
    a = make_jpeg("a.jpg", (40, 20), orientation=6)
    b = make_jpeg("b.jpg", (20, 40))

    canvas = compose_images(a, b, margin=10, width=100)

    assert canvas.size == (100, 80)


def test_vertical_pipeline(make_jpeg):
    a = make_jpeg("a.jpg", (200, 100))
    b = make_jpeg("b.jpg", (100, 100))

    canvas = compose_images(a, b, margin=0, width=100, vertical=True)

    # a scaled to 100x50, stacked on b: 100x150
    assert canvas.size == (100, 150)


def test_missing_input_aborts(make_jpeg, tmp_path):
    a = make_jpeg("a.jpg", (10, 10))
    with pytest.raises(FileNotFoundError):
        run_pipeline(a, tmp_path / "missing.jpg", out_path=tmp_path / "o.jpg")
    assert not (tmp_path / "o.jpg").exists()


def test_save_jpeg_to_stream_converts_rgba():
    buf = BytesIO()
    assert save_jpeg(Image.new("RGBA", (8, 8), (1, 2, 3, 4)), buf) is None
    buf.seek(0)
    with Image.open(buf) as img:
        assert img.format == "JPEG"
        assert img.mode == "RGB"


def test_save_jpeg_returns_path(tmp_path):
    out = save_jpeg(Image.new("RGB", (8, 8)), tmp_path / "x.jpg", quality=90)
    assert Path(out).exists()
