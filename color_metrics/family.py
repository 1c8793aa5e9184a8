"""hue 값으로 색 계열(패밀리)을 나눈다"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Iterable, Sequence, Tuple

from palette_loader import ColorSwatch

FAMILY_PINK = "pink"
FAMILY_BROWN = "brown"
FAMILY_GREEN = "green"
FAMILY_BLUE = "blue"
FAMILY_PURPLE = "purple"

FAMILY_ORDER = (FAMILY_PINK, FAMILY_BROWN, FAMILY_GREEN, FAMILY_BLUE, FAMILY_PURPLE)


@dataclass(frozen=True)
class ClassifiedSwatch(ColorSwatch):
    color_family: str

    @classmethod
    def from_swatch(cls, swatch: ColorSwatch, color_family: str) -> "ClassifiedSwatch":
        base = {f.name: getattr(swatch, f.name) for f in fields(ColorSwatch)}
        return cls(**base, color_family=color_family)


def hue_bucket(hue: float) -> int:
    """hue(0~1)를 0~1000 정수로 바꾼다. 반올림은 0.5에서 올림."""
    if not 0.0 <= hue <= 1.0:
        raise ValueError(f"hue 범위는 0~1이야: {hue}")
    return int(math.floor(hue * 1000 + 0.5))


def classify_family(hue: float) -> str:
    r = hue_bucket(hue)
    # pink는 0/1000 경계를 감싼다
    if r > 900 or r <= 50:
        return FAMILY_PINK
    if r <= 140:
        return FAMILY_BROWN
    if r <= 490:
        return FAMILY_GREEN
    if r <= 600:
        return FAMILY_BLUE
    return FAMILY_PURPLE


def classify_swatches(swatches: Iterable[ColorSwatch]) -> Tuple[ClassifiedSwatch, ...]:
    return tuple(ClassifiedSwatch.from_swatch(s, classify_family(s.hue)) for s in swatches)


def distinct_families(classified: Sequence[ClassifiedSwatch]) -> Tuple[str, ...]:
    present = {s.color_family for s in classified}
    return tuple(family for family in FAMILY_ORDER if family in present)
