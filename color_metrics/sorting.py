"""팔레트 정렬 (CIELCh hue → L → C)"""
from __future__ import annotations

from typing import Sequence, Tuple, TypeVar

from color_utils import rgb_to_lch
from palette_loader import ColorSwatch

S = TypeVar("S", bound=ColorSwatch)


def lch_sort_key(swatch: ColorSwatch) -> Tuple[float, float, float]:
    lightness, chroma, hue = rgb_to_lch(swatch.red, swatch.green, swatch.blue)
    return hue, lightness, chroma


def sort_palette(swatches: Sequence[S]) -> Tuple[S, ...]:
    # sorted()는 안정 정렬이라 세 값이 모두 같으면 원래 순서가 유지된다
    return tuple(sorted(swatches, key=lch_sort_key))
