"""이미지별 팔레트 판정과 배치 순위"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from PIL import Image

from color_metrics.family import ClassifiedSwatch, classify_swatches, distinct_families
from color_metrics.monochrome import monochrome_score
from color_metrics.palette_filter import filter_palette
from color_metrics.sorting import sort_palette
from config import DEFAULT_CONFIG, PipelineConfig, validate_config
from palette_loader import ImagePalette

logger = logging.getLogger("palette_triage")


@dataclass(frozen=True)
class EvaluatedImage:
    image_ref: str
    colors: Tuple[ClassifiedSwatch, ...]
    distinct_colors: Tuple[str, ...]
    valid: bool
    monochrome_score: int
    image: Optional[Image.Image] = field(default=None, compare=False, repr=False)


RankingStrategy = Callable[[Sequence[EvaluatedImage]], List[EvaluatedImage]]


def rank_least_monochrome(results: Sequence[EvaluatedImage]) -> List[EvaluatedImage]:
    return sorted(results, key=lambda r: r.monochrome_score)


def rank_most_distinct(results: Sequence[EvaluatedImage]) -> List[EvaluatedImage]:
    return sorted(results, key=lambda r: len(r.distinct_colors), reverse=True)


def rank_most_colors(results: Sequence[EvaluatedImage]) -> List[EvaluatedImage]:
    return sorted(results, key=lambda r: len(r.colors), reverse=True)


RANKING_STRATEGIES: Dict[str, RankingStrategy] = {
    "least_monochrome": rank_least_monochrome,
    "most_distinct": rank_most_distinct,
    "most_colors": rank_most_colors,
}

DEFAULT_RANKING = "least_monochrome"


def resolve_ranking(name: str) -> RankingStrategy:
    try:
        return RANKING_STRATEGIES[name]
    except KeyError:
        raise ValueError(f"알 수 없는 정렬 방식이야: {name}") from None


def is_valid(color_count: int, family_count: int, config: PipelineConfig) -> bool:
    return (
        family_count >= config.min_distinct_colors_required
        and color_count >= config.min_colors_required
    )


def evaluate_image(palette: ImagePalette, config: PipelineConfig) -> EvaluatedImage:
    kept = filter_palette(palette.swatches, config.dark_threshold, config.gray_threshold)
    colors = sort_palette(classify_swatches(kept))
    families = distinct_families(colors)
    result = EvaluatedImage(
        image_ref=palette.image_ref,
        colors=colors,
        distinct_colors=families,
        valid=is_valid(len(colors), len(families), config),
        monochrome_score=monochrome_score(len(colors), len(families)),
        image=palette.image,
    )
    logger.debug(
        "[정보] %s: 스와치 %d/%d개 통과, 계열 %s, 단색점수 %d → %s",
        palette.image_ref,
        len(colors),
        len(palette.swatches),
        ",".join(families) or "-",
        result.monochrome_score,
        "통과" if result.valid else "탈락",
    )
    return result


def evaluate_batch(
    palettes: Sequence[ImagePalette],
    config: PipelineConfig | None = None,
    ranking: str = DEFAULT_RANKING,
) -> List[EvaluatedImage]:
    """배치 전체를 처음부터 다시 판정하고 순위를 매긴다. 입력은 건드리지 않는다."""
    cfg = validate_config(config or DEFAULT_CONFIG)
    strategy = resolve_ranking(ranking)
    ranked = strategy([evaluate_image(p, cfg) for p in palettes])
    passed = sum(1 for r in ranked if r.valid)
    logger.info(
        "[정보] %d장 판정 완료: 통과 %d장 (L≥%.0f, C≥%.0f, 색상≥%d, 계열≥%d, 정렬=%s)",
        len(ranked),
        passed,
        cfg.dark_threshold,
        cfg.gray_threshold,
        cfg.min_colors_required,
        cfg.min_distinct_colors_required,
        ranking,
    )
    return ranked


class ImageEvaluator:
    def __init__(self, config: PipelineConfig | None = None, ranking: str = DEFAULT_RANKING):
        self.config = validate_config(config or DEFAULT_CONFIG)
        resolve_ranking(ranking)
        self.ranking = ranking

    def evaluate(self, palettes: Sequence[ImagePalette]) -> List[EvaluatedImage]:
        return evaluate_batch(palettes, self.config, self.ranking)
