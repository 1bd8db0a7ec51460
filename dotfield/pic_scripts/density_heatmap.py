"""Render the density field itself as a grid heatmap SVG."""

from dataclasses import dataclass

import numpy as np
import svgwrite

from dotfield.field import density_grid, frame_index
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


@dataclass
class HeatmapConfig:
    width: int = 1200
    height: int = 1200
    cols: int = 120
    rows: int = 120
    background: str = "#000000"
    fill: str = "#ffffff"
    draw_threshold: float = 0.02


def generate_heatmap_svg(
    out_file: str, grid: np.ndarray, params: Params, cfg: HeatmapConfig
) -> int:
    """Draw one rect per grid cell above the threshold; returns the cell count."""
    background, fill = cfg.background, cfg.fill
    if params.render.invert:
        background, fill = fill, background

    threshold = cfg.draw_threshold
    if params.render.threshold is not None:
        threshold = max(threshold, params.render.threshold)

    n_rows, n_cols = grid.shape
    cell_w = cfg.width / n_cols
    cell_h = cfg.height / n_rows

    dwg = svgwrite.Drawing(out_file, size=(cfg.width, cfg.height))
    dwg.add(dwg.rect(insert=(0, 0), size=(cfg.width, cfg.height), fill=background))

    drawn = 0
    for r in range(n_rows):
        y0 = r * cell_h
        row = grid[r, :]
        for c in range(n_cols):
            v = float(row[c])
            if v < threshold:
                continue

            dwg.add(
                dwg.rect(
                    insert=(c * cell_w, y0),
                    size=(cell_w + 0.2, cell_h + 0.2),
                    fill=fill,
                    fill_opacity=round(v, 3),
                    stroke="none",
                )
            )
            drawn += 1

    dwg.save()
    return drawn


if __name__ == "__main__":
    config = load_toml_config(config_path())
    out_dir = output_dir()
    out_dir.mkdir(parents=True, exist_ok=True)

    params = params_from_config(config)
    t = resolve_time(config)
    colors = resolve_colors(config)
    width, height = resolve_size(config)

    cfg = HeatmapConfig(
        width=width,
        height=height,
        background=colors["bg"],
        fill=colors["stroke"],
    )
    grid = density_grid(params, frame_index(t), cfg.cols, cfg.rows)
    out_path = out_dir / "tmp.svg"
    cells = generate_heatmap_svg(str(out_path), grid, params, cfg)
    print(f"Wrote {out_path} (Rows={cfg.rows}, Cols={cfg.cols}, cells={cells})")
