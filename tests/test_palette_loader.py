"""스와치 추출/로딩 테스트"""
from pathlib import Path
import json
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from PIL import Image

from palette_loader import (
    extract_swatches,
    list_images,
    load_image_palette,
    load_image_palettes,
    load_swatch_batch,
    swatch_from_dict,
    swatch_from_rgb,
)


def two_tone_image() -> Image.Image:
    img = Image.new("RGB", (40, 20), (255, 0, 0))
    img.paste((0, 0, 255), (20, 0, 40, 20))
    return img


def test_swatch_from_rgb_fields():
    swatch = swatch_from_rgb(255, 0, 0, 0.5)
    assert swatch.hex == "#FF0000"
    assert swatch.rgb == (255, 0, 0)
    assert swatch.hue == pytest.approx(0.0)
    assert swatch.saturation == pytest.approx(1.0)
    assert swatch.lightness == pytest.approx(0.5)
    assert swatch.intensity == pytest.approx(1.0)
    assert swatch.area == 0.5


def test_swatch_from_dict_normalizes_hex():
    swatch = swatch_from_dict({"hex": "ff0000", "red": 255, "green": 0, "blue": 0, "hue": 0.0, "area": 0.2})
    assert swatch.hex == "#FF0000"


@pytest.mark.parametrize(
    "raw",
    [
        {"red": 300, "green": 0, "blue": 0, "hue": 0.1},
        {"red": 10, "green": 0, "blue": 0, "hue": 1.5},
        {"red": 10, "green": 0, "blue": 0, "hue": 0.1, "area": 2.0},
    ],
)
def test_swatch_from_dict_rejects_out_of_range(raw):
    with pytest.raises(ValueError):
        swatch_from_dict(raw)


def test_extract_swatches_two_tones():
    swatches = extract_swatches(two_tone_image())
    assert {s.hex for s in swatches} == {"#FF0000", "#0000FF"}
    assert sum(s.area for s in swatches) == pytest.approx(1.0)
    assert all(s.area == pytest.approx(0.5) for s in swatches)


def test_extract_swatches_single_color():
    (swatch,) = extract_swatches(Image.new("RGB", (10, 10), (10, 200, 30)))
    assert swatch.hex == "#0AC81E"
    assert swatch.area == pytest.approx(1.0)


def test_load_image_palette_missing_file_becomes_placeholder(tmp_path: Path):
    palette = load_image_palette(tmp_path / "nope.jpg")
    assert palette.image_ref == "nope.jpg"
    assert palette.swatches == ()
    assert palette.image is None


def test_load_image_palette_undecodable_file_becomes_placeholder(tmp_path: Path):
    broken = tmp_path / "broken.jpg"
    broken.write_bytes(b"not an image")
    assert load_image_palette(broken).swatches == ()


def test_load_image_palettes_keeps_order(tmp_path: Path):
    good = tmp_path / "good.png"
    two_tone_image().save(good)
    broken = tmp_path / "broken.webp"
    broken.write_bytes(b"\x00\x01")
    palettes = load_image_palettes([broken, good], max_workers=2)
    assert [p.image_ref for p in palettes] == ["broken.webp", "good.png"]
    assert palettes[0].swatches == ()
    assert len(palettes[1].swatches) == 2
    assert palettes[1].image is not None


def test_list_images_filters_extensions(tmp_path: Path):
    for name in ("b.jpg", "a.webp", "notes.txt"):
        (tmp_path / name).write_bytes(b"")
    assert [p.name for p in list_images(tmp_path)] == ["a.webp", "b.jpg"]


def test_load_swatch_batch(tmp_path: Path):
    path = tmp_path / "batch.json"
    path.write_text(
        json.dumps(
            [
                {
                    "image": "1.jpg",
                    "swatches": [
                        {"hex": "#FF0000", "red": 255, "green": 0, "blue": 0, "hue": 0.0, "saturation": 1.0,
                         "lightness": 0.5, "intensity": 1.0, "area": 0.4}
                    ],
                },
                {"image": "2.jpg", "swatches": []},
            ]
        ),
        encoding="utf-8",
    )
    palettes = load_swatch_batch(path)
    assert [p.image_ref for p in palettes] == ["1.jpg", "2.jpg"]
    assert palettes[0].swatches[0].area == 0.4
    assert palettes[1].swatches == ()


def test_oversized_image_becomes_placeholder(tmp_path: Path, monkeypatch):
    big = tmp_path / "big.png"
    Image.new("RGB", (100, 100), (255, 0, 0)).save(big)
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    palettes = load_image_palettes([big])
    assert [p.image_ref for p in palettes] == ["big.png"]
    assert palettes[0].swatches == ()
    assert palettes[0].image is None
