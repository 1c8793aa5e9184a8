"""갤러리 카드용 썸네일/팔레트 오버레이"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageOps

from color_metrics.evaluate import EvaluatedImage
from color_utils import clamp
from config import THUMBNAIL_SIZE
from palette_loader import ColorSwatch

VALID_BORDER = (154, 205, 50)  # yellowgreen
INVALID_BORDER = (250, 128, 114)  # salmon
PLACEHOLDER_FILL = (225, 225, 225)
STRIP_BACKGROUND = (255, 255, 255)


def fit_thumbnail(img: Optional[Image.Image], size: Tuple[int, int] = THUMBNAIL_SIZE) -> Image.Image:
    if img is None:
        return Image.new("RGB", size, PLACEHOLDER_FILL)
    return ImageOps.fit(img.convert("RGB"), size, Image.LANCZOS)


def draw_validity_border(img: Image.Image, valid: bool, width: int = 5) -> Image.Image:
    base = img.convert("RGB").copy()
    draw = ImageDraw.Draw(base)
    w, h = base.size
    color = VALID_BORDER if valid else INVALID_BORDER
    draw.rectangle((0, 0, w - 1, h - 1), outline=color, width=width)
    return base


def draw_palette_strip(img: Image.Image, colors: Sequence[ColorSwatch], dot: int = 16, gap: int = 2) -> Image.Image:
    """이미지 아래에 팔레트 점을 줄바꿈하며 이어 붙인다."""
    base = img.convert("RGB")
    w, h = base.size
    if not colors:
        return base.copy()
    per_row = max(1, int(clamp((w + gap) // (dot + gap), 1, len(colors))))
    rows = (len(colors) + per_row - 1) // per_row
    strip_h = rows * (dot + gap) + gap
    canvas = Image.new("RGB", (w, h + strip_h), STRIP_BACKGROUND)
    canvas.paste(base, (0, 0))
    draw = ImageDraw.Draw(canvas)
    for idx, swatch in enumerate(colors):
        row, col = divmod(idx, per_row)
        x = col * (dot + gap)
        y = h + gap + row * (dot + gap)
        draw.ellipse((x, y, x + dot - 1, y + dot - 1), fill=swatch.rgb)
    return canvas


def compose_card(result: EvaluatedImage, size: Tuple[int, int] = THUMBNAIL_SIZE) -> Image.Image:
    thumb = draw_validity_border(fit_thumbnail(result.image, size), result.valid)
    return draw_palette_strip(thumb, result.colors)
