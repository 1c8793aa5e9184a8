"""명도/채도 임계값 필터"""
from __future__ import annotations

from typing import Sequence, Tuple

from color_utils import rgb_to_lch
from palette_loader import ColorSwatch


def passes_thresholds(swatch: ColorSwatch, dark_threshold: float, gray_threshold: float) -> bool:
    lightness, chroma, _ = rgb_to_lch(swatch.red, swatch.green, swatch.blue)
    return lightness >= dark_threshold and chroma >= gray_threshold


def filter_palette(
    swatches: Sequence[ColorSwatch],
    dark_threshold: float,
    gray_threshold: float,
) -> Tuple[ColorSwatch, ...]:
    """너무 어둡거나(L) 회색에 가까운(C) 스와치를 뺀다. 순서는 그대로 둔다."""
    return tuple(s for s in swatches if passes_thresholds(s, dark_threshold, gray_threshold))
