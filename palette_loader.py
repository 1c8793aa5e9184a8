"""이미지 스와치 추출/배치 로딩 유틸"""
from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from color_utils import normalize_color_input, rgb_to_hex, rgb_to_hsl01
from config import DEFAULT_MAX_SWATCHES, IMAGE_EXTENSIONS, LOAD_WORKERS

logger = logging.getLogger("palette_triage")


@dataclass(frozen=True)
class ColorSwatch:
    hex: str
    red: int
    green: int
    blue: int
    hue: float  # HSL hue, 0~1
    saturation: float
    lightness: float
    intensity: float
    area: float  # 이미지에서 차지하는 비율

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


@dataclass(frozen=True)
class ImagePalette:
    image_ref: str
    swatches: Tuple[ColorSwatch, ...]
    image: Optional[Image.Image] = field(default=None, compare=False, repr=False)


def swatch_from_rgb(r: int, g: int, b: int, area: float) -> ColorSwatch:
    hex_value = rgb_to_hex(r, g, b)
    h, s, l = rgb_to_hsl01(r, g, b)
    intensity = s * ((0.5 - abs(0.5 - l)) * 2)
    return ColorSwatch(
        hex=hex_value,
        red=r,
        green=g,
        blue=b,
        hue=h,
        saturation=s,
        lightness=l,
        intensity=intensity,
        area=float(area),
    )


def swatch_from_dict(raw: Dict) -> ColorSwatch:
    """JSON 스와치 레코드를 ColorSwatch로 바꾼다. 범위를 벗어나면 ValueError."""
    r, g, b = int(raw["red"]), int(raw["green"]), int(raw["blue"])
    computed_hex = rgb_to_hex(r, g, b)
    hex_value = normalize_color_input(str(raw.get("hex", ""))) or computed_hex
    hue = float(raw["hue"])
    if not 0.0 <= hue <= 1.0:
        raise ValueError(f"hue 범위는 0~1이야: {hue}")
    area = float(raw.get("area", 0.0))
    if not 0.0 <= area <= 1.0:
        raise ValueError(f"area 범위는 0~1이야: {area}")
    return ColorSwatch(
        hex=hex_value,
        red=r,
        green=g,
        blue=b,
        hue=hue,
        saturation=float(raw.get("saturation", 0.0)),
        lightness=float(raw.get("lightness", 0.0)),
        intensity=float(raw.get("intensity", 0.0)),
        area=area,
    )


def _resize_longest_side(pil_img: Image.Image, longest: int = 256) -> Image.Image:
    w, h = pil_img.size
    if max(w, h) <= longest:
        return pil_img
    if w >= h:
        new_w = longest
        new_h = max(1, int(h * (longest / w)))
    else:
        new_h = longest
        new_w = max(1, int(w * (longest / h)))
    return pil_img.resize((new_w, new_h), Image.LANCZOS)


def extract_swatches(pil_img: Image.Image, max_colors: int = DEFAULT_MAX_SWATCHES) -> Tuple[ColorSwatch, ...]:
    img = _resize_longest_side(pil_img.convert("RGB"))
    flat = np.asarray(img).reshape(-1, 3)
    if flat.size == 0:
        return ()
    k = min(max_colors, len(np.unique(flat, axis=0)))
    km = KMeans(n_clusters=k, n_init=5, random_state=42)
    labels = km.fit_predict(flat.astype(np.float32) / 255.0)
    centers = np.clip(km.cluster_centers_, 0.0, 1.0)
    counts = np.bincount(labels, minlength=k)
    total = float(counts.sum())

    # 반올림 후 같은 HEX가 되는 클러스터는 면적을 합친다
    merged: Dict[Tuple[int, int, int], int] = {}
    for i in range(k):
        if counts[i] == 0:
            continue
        r, g, b = (centers[i] * 255).round().astype(int)
        key = (int(r), int(g), int(b))
        merged[key] = merged.get(key, 0) + int(counts[i])

    swatches = [swatch_from_rgb(r, g, b, count / total) for (r, g, b), count in merged.items()]
    swatches.sort(key=lambda s: s.area, reverse=True)
    return tuple(swatches)


def load_image_palette(path: Path, max_colors: int = DEFAULT_MAX_SWATCHES) -> ImagePalette:
    """이미지 하나를 읽어 스와치를 추출한다. 실패하면 빈 팔레트를 돌려준다."""
    ref = Path(path).name
    try:
        with Image.open(path) as raw:
            image = raw.convert("RGB")
        swatches = extract_swatches(image, max_colors)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        logger.warning("[경고] 이미지 로딩 실패: %s (%s) → 빈 팔레트로 대체", ref, exc)
        return ImagePalette(image_ref=ref, swatches=())
    logger.debug("[정보] %s: 스와치 %d개 추출", ref, len(swatches))
    return ImagePalette(image_ref=ref, swatches=swatches, image=image)


def load_image_palettes(
    paths: Iterable[Path],
    max_colors: int = DEFAULT_MAX_SWATCHES,
    max_workers: int = LOAD_WORKERS,
) -> List[ImagePalette]:
    """모든 이미지를 동시에 불러온 뒤 입력 순서대로 모은다."""
    path_list = [Path(p) for p in paths]
    if not path_list:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        palettes = list(pool.map(lambda p: load_image_palette(p, max_colors), path_list))
    empty = sum(1 for p in palettes if not p.swatches)
    logger.info("[정보] 이미지 %d장 로딩 완료 (빈 팔레트 %d장)", len(palettes), empty)
    return palettes


def list_images(base_dir: Path) -> List[Path]:
    return sorted(p for p in Path(base_dir).iterdir() if p.suffix.lower() in IMAGE_EXTENSIONS)


def load_swatch_batch(path: Path) -> List[ImagePalette]:
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    palettes: List[ImagePalette] = []
    for entry in raw:
        swatches: Sequence[Dict] = entry.get("swatches", [])
        palettes.append(
            ImagePalette(
                image_ref=str(entry["image"]),
                swatches=tuple(swatch_from_dict(s) for s in swatches),
            )
        )
    return palettes
