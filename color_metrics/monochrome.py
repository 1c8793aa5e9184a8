"""단색(모노크롬) 가능성 점수"""
from __future__ import annotations

import math
from dataclasses import dataclass

COUNT_SCALE = 15  # 스와치 15개 = 100
FAMILY_SCALE = 5  # 계열 5개 = 100
ABUNDANT_SWATCH_COUNT = 20
VARIED_FAMILY_COUNT = 3


@dataclass(frozen=True)
class MonochromeBreakdown:
    swatch_count: int
    family_count: int
    count_score: float
    family_score: float
    blend: int
    overridden: bool
    score: int


def monochrome_breakdown(swatch_count: int, family_count: int) -> MonochromeBreakdown:
    if swatch_count < 0 or family_count < 0:
        raise ValueError("스와치/계열 개수는 0 이상이어야 해.")
    count_score = swatch_count * 100 / COUNT_SCALE
    family_score = family_count * 100 / FAMILY_SCALE
    blend = int(math.floor(abs((count_score + family_score) / 2 - 100)))
    # 색이 충분히 많거나 다양하면 단색으로 보지 않는다
    overridden = swatch_count > ABUNDANT_SWATCH_COUNT or family_count > VARIED_FAMILY_COUNT
    return MonochromeBreakdown(
        swatch_count=swatch_count,
        family_count=family_count,
        count_score=count_score,
        family_score=family_score,
        blend=blend,
        overridden=overridden,
        score=0 if overridden else blend,
    )


def monochrome_score(swatch_count: int, family_count: int) -> int:
    """0~100. 높을수록 단색에 가깝다."""
    return monochrome_breakdown(swatch_count, family_count).score
