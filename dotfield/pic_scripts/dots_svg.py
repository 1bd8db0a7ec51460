"""Render one frame of the dot cloud as an SVG using config/variables paths."""

from dataclasses import dataclass
from typing import Sequence

import svgwrite

from dotfield.params import Params
from dotfield.py_helper.config_utils import (
    config_path,
    load_toml_config,
    output_dir,
    params_from_config,
    resolve_colors,
    resolve_size,
    resolve_time,
)
from dotfield.sampler import Dot, generate_dots


@dataclass
class DotsSvgConfig:
    width: int = 1200
    height: int = 1200

    background: str = "#0b0c10"
    fill: str = "#f5f5f5"

    # dot opacity follows its density weight
    opacity_min: float = 0.55
    opacity_max: float = 1.0


def _colors(params: Params, cfg: DotsSvgConfig) -> tuple[str, str]:
    if params.render.invert:
        return cfg.fill, cfg.background
    return cfg.background, cfg.fill


def visible_dots(dots: Sequence[Dot], params: Params) -> list[Dot]:
    threshold = params.render.threshold
    if threshold is None:
        return list(dots)
    return [d for d in dots if d.w >= threshold]


def generate_dots_svg(
    out_file: str, dots: Sequence[Dot], params: Params, cfg: DotsSvgConfig
) -> int:
    """Draw dots into out_file and return how many were drawn."""
    background, fill = _colors(params, cfg)
    sx = cfg.width / params.canvas.width
    sy = cfg.height / params.canvas.height

    dwg = svgwrite.Drawing(out_file, size=(cfg.width, cfg.height))
    dwg.add(dwg.rect(insert=(0, 0), size=("100%", "100%"), fill=background))

    group = dwg.g(fill=fill, stroke="none")
    shown = visible_dots(dots, params)
    for d in shown:
        op = cfg.opacity_min + (cfg.opacity_max - cfg.opacity_min) * d.w
        group.add(
            dwg.circle(
                center=(round(d.x * sx, 2), round(d.y * sy, 2)),
                r=round(d.r * sx, 3),
                fill_opacity=round(op, 3),
            )
        )
    dwg.add(group)

    dwg.save()
    return len(shown)


if __name__ == "__main__":
    config = load_toml_config(config_path())
    out_dir = output_dir()
    out_dir.mkdir(parents=True, exist_ok=True)

    params = params_from_config(config)
    t = resolve_time(config)
    colors = resolve_colors(config)
    width, height = resolve_size(config)

    cfg = DotsSvgConfig(
        width=width,
        height=height,
        background=colors["bg"],
        fill=colors["stroke"],
    )
    out_path = out_dir / "tmp.svg"
    drawn = generate_dots_svg(str(out_path), generate_dots(params, t), params, cfg)
    print(f"Wrote {out_path} (seed={params.seed}, t={t}, dots={drawn})")
