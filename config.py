"""앱 전역 설정과 팔레트 판정 파라미터"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class PipelineConfig:
    min_colors_required: int = 10
    min_distinct_colors_required: int = 3
    dark_threshold: float = 36.0  # CIELCh L 하한
    gray_threshold: float = 6.0  # CIELCh C 하한


DEFAULT_CONFIG = PipelineConfig()

# (최소, 최대). 최대가 None이면 상한 없음
CONFIG_BOUNDS: Dict[str, Tuple[float, Optional[float]]] = {
    "min_colors_required": (0, None),
    "min_distinct_colors_required": (0, 6),
    "dark_threshold": (0, 88),
    "gray_threshold": (0, 12),
}

INTEGER_FIELDS = ("min_colors_required", "min_distinct_colors_required")

MIN_COLORS_SLIDER_MAX = 20

DEFAULT_MAX_SWATCHES = 24
THUMBNAIL_SIZE = (250, 150)
LOAD_WORKERS = 8
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".bmp")


RANKING_DISPLAY_ORDER = [
    ("least_monochrome", "단색 가능성 낮은 순"),
    ("most_distinct", "색 계열 많은 순"),
    ("most_colors", "색상 수 많은 순"),
]


def validate_config(cfg: PipelineConfig) -> PipelineConfig:
    """범위를 벗어난 설정이면 ValueError를 던진다."""
    for f in fields(cfg):
        value = getattr(cfg, f.name)
        if f.name in INTEGER_FIELDS and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError(f"{f.name} 값은 정수여야 해: {value!r}")
        lo, hi = CONFIG_BOUNDS[f.name]
        if hi is None and value < lo:
            raise ValueError(f"{f.name} 값은 {lo} 이상이어야 해: {value!r}")
        if hi is not None and not lo <= value <= hi:
            raise ValueError(f"{f.name} 범위는 {lo}~{hi}야: {value!r}")
    return cfg
