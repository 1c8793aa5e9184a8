"""신분증 사진 팔레트 다양성 트리아지 Gradio 앱"""
from __future__ import annotations
import logging
import math
from typing import List, Optional, Sequence, Tuple

import gradio as gr
from PIL import Image

from color_metrics.evaluate import DEFAULT_RANKING, EvaluatedImage, evaluate_batch
from config import (
    CONFIG_BOUNDS,
    DEFAULT_CONFIG,
    DEFAULT_MAX_SWATCHES,
    MIN_COLORS_SLIDER_MAX,
    RANKING_DISPLAY_ORDER,
    PipelineConfig,
)
from palette_loader import ImagePalette, load_image_palettes
from ui.overlays import compose_card

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("palette_triage")

LABEL_RULES: List[Tuple[int, str]] = [
    (75, "단색 의심"),
    (40, "애매"),
    (0, "다채로움"),
]


def ranking_options() -> List[Tuple[str, str]]:
    return RANKING_DISPLAY_ORDER


def resolve_ranking_id(label: str) -> str:
    for ranking_id, display in ranking_options():
        if display == label:
            return ranking_id
    return DEFAULT_RANKING


def label_for_score(score: int) -> str:
    for threshold, label in LABEL_RULES:
        if score >= threshold:
            return label
    return "다채로움"


def threshold_caption(title: str, value: float, maximum: float) -> str:
    percent = math.floor(value * 100 / maximum) if maximum else 0
    return f"{title}: {percent}%"


def render_palette_dots(result: EvaluatedImage) -> str:
    dots = "".join(
        f"<span title='{c.hex} · {c.color_family}' style='display:inline-block;width:14px;height:14px;"
        f"border-radius:50px;background:{c.hex};'></span>"
        for c in result.colors
    )
    return dots or "<span style='color:#999;'>-</span>"


def render_summary_table(results: Sequence[EvaluatedImage]) -> str:
    rows = []
    for idx, result in enumerate(results, 1):
        border = "yellowgreen" if result.valid else "salmon"
        rows.append(
            f"<tr style='border-left:5px solid {border}'><td>{idx}</td><td><code>{result.image_ref}</code></td>"
            f"<td>{len(result.colors)}</td><td>{', '.join(result.distinct_colors) or '-'}</td>"
            f"<td>{result.monochrome_score} ({label_for_score(result.monochrome_score)})</td>"
            f"<td>{'통과' if result.valid else '탈락'}</td><td>{render_palette_dots(result)}</td></tr>"
        )
    return """
    <table style='width:100%;border-collapse:collapse;font-size:12px;'>
      <thead><tr style='border-bottom:1px solid #ccc'><th>순위</th><th>이미지</th><th>색상 수</th><th>계열</th><th>단색 점수</th><th>판정</th><th>팔레트</th></tr></thead>
      <tbody>{rows}</tbody>
    </table>
    """.format(rows="".join(rows))


def build_gallery(results: Sequence[EvaluatedImage]) -> List[Tuple[Image.Image, str]]:
    return [
        (compose_card(r), f"{r.image_ref} · {len(r.colors)}색/{len(r.distinct_colors)}계열 · 단색 {r.monochrome_score}")
        for r in results
    ]


def recompute(
    palettes: Optional[List[ImagePalette]],
    dark: float,
    gray: float,
    min_colors: float,
    min_distinct: float,
    ranking_label: str,
):
    config = PipelineConfig(
        min_colors_required=int(min_colors),
        min_distinct_colors_required=int(min_distinct),
        dark_threshold=float(dark),
        gray_threshold=float(gray),
    )
    dark_md = threshold_caption("DARK CUT", dark, CONFIG_BOUNDS["dark_threshold"][1])
    gray_md = threshold_caption("GRAY CUT", gray, CONFIG_BOUNDS["gray_threshold"][1])
    try:
        results = evaluate_batch(palettes or [], config, resolve_ranking_id(ranking_label))
    except ValueError as exc:
        gr.Warning(str(exc))
        return gr.update(), gr.update(), dark_md, gray_md
    return build_gallery(results), render_summary_table(results), dark_md, gray_md


def on_upload(files, max_colors: float) -> List[ImagePalette]:
    if not files:
        return []
    paths = [getattr(f, "name", f) for f in files]
    palettes = load_image_palettes(paths, int(max_colors))
    if any(not p.swatches for p in palettes):
        gr.Warning("일부 이미지를 읽지 못해서 빈 팔레트로 처리했어.")
    return palettes


def build_ui() -> gr.Blocks:
    dark_lo, dark_hi = CONFIG_BOUNDS["dark_threshold"]
    gray_lo, gray_hi = CONFIG_BOUNDS["gray_threshold"]
    distinct_lo, distinct_hi = CONFIG_BOUNDS["min_distinct_colors_required"]
    with gr.Blocks(title="팔레트 다양성 트리아지", css="body{background:hsl(220,55%,96%);}") as demo:
        gr.Markdown("""
        # 팔레트 다양성 트리아지
        이미지에서 뽑은 색을 명도/채도 기준으로 거른 뒤, 색 계열 수와 단색 점수로 통과 여부를 판정해.
        슬라이더를 움직이면 배치 전체가 즉시 다시 계산돼.
        """)
        palettes_state = gr.State([])
        with gr.Row():
            with gr.Column(scale=1):
                dark_caption = gr.Markdown(threshold_caption("DARK CUT", DEFAULT_CONFIG.dark_threshold, dark_hi))
                dark_slider = gr.Slider(dark_lo, dark_hi, value=DEFAULT_CONFIG.dark_threshold, step=1, label="명도 하한 (L)")
            with gr.Column(scale=1):
                gray_caption = gr.Markdown(threshold_caption("GRAY CUT", DEFAULT_CONFIG.gray_threshold, gray_hi))
                gray_slider = gr.Slider(gray_lo, gray_hi, value=DEFAULT_CONFIG.gray_threshold, step=1, label="채도 하한 (C)")
            with gr.Column(scale=1):
                colors_slider = gr.Slider(0, MIN_COLORS_SLIDER_MAX, value=DEFAULT_CONFIG.min_colors_required, step=1, label="통과 최소 색상 수")
                distinct_slider = gr.Slider(distinct_lo, distinct_hi, value=DEFAULT_CONFIG.min_distinct_colors_required, step=1, label="통과 최소 계열 수")
            with gr.Column(scale=1):
                ranking_dropdown = gr.Dropdown(choices=[label for _, label in ranking_options()], label="정렬 방식", value=ranking_options()[0][1], interactive=True)
                max_colors_slider = gr.Slider(4, 48, value=DEFAULT_MAX_SWATCHES, step=1, label="이미지당 최대 추출 색상 수")
        upload = gr.File(label="이미지 업로드", file_count="multiple", file_types=["image"])
        gallery = gr.Gallery(label="판정 결과", columns=5, object_fit="contain", height="auto")
        summary = gr.HTML(label="요약표")

        controls = [palettes_state, dark_slider, gray_slider, colors_slider, distinct_slider, ranking_dropdown]
        outputs = [gallery, summary, dark_caption, gray_caption]

        # 이미지는 한 번만 추출하고, 판정은 입력이 바뀔 때마다 처음부터 다시 한다
        upload.change(
            fn=on_upload,
            inputs=[upload, max_colors_slider],
            outputs=[palettes_state],
        ).then(fn=recompute, inputs=controls, outputs=outputs)

        for control in (dark_slider, gray_slider, colors_slider, distinct_slider):
            control.input(fn=recompute, inputs=controls, outputs=outputs, trigger_mode="always_last")
        ranking_dropdown.change(fn=recompute, inputs=controls, outputs=outputs)

    return demo


if __name__ == "__main__":
    print("Gradio 앱을 시작할게. 브라우저에서 확인해줘.")
    app = build_ui()
    app.launch()
