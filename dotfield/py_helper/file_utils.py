"""Output file helpers: SVG to PNG conversion and naming."""

import os
import sys
from pathlib import Path


def rename_file(source: Path, new_name: str) -> Path:
    """
    Rename a file while keeping its current suffix unless new_name has one.
    Example: rename_file(Path("output/tmp.png"), "dots_svg_7_00075") -> output/dots_svg_7_00075.png
    """
    if not source.exists():
        raise FileNotFoundError(source)
    if not new_name:
        raise ValueError("new_name must be a non-empty string")

    target_name = new_name if Path(new_name).suffix else f"{new_name}{source.suffix}"
    target = source.with_name(Path(target_name).name)
    return source.replace(target)


def svg_to_png(
    source: Path, target: Path | None = None, dpi: float | None = None
) -> Path:
    """
    Convert an SVG file to PNG using cairosvg.
    """
    if not source.exists():
        raise FileNotFoundError(source)

    output_path = target or source.with_suffix(".png")
    effective_dpi = 96 if dpi is None else int(dpi)

    if sys.platform == "darwin":
        _ensure_macos_cairo_path()

    import cairosvg

    cairosvg.svg2png(url=str(source), write_to=str(output_path), dpi=effective_dpi)
    return output_path


def publish_svg(tmp_svg: Path, new_name: str, keep_svg: bool = False) -> Path:
    """
    Turn a render script's tmp.svg into <new_name>.png next to it.
    With keep_svg the SVG is kept as <new_name>.svg as well.
    """
    if not tmp_svg.exists():
        raise FileNotFoundError(tmp_svg)

    png_path = svg_to_png(tmp_svg)
    if keep_svg:
        rename_file(tmp_svg, f"{new_name}.svg")
    else:
        tmp_svg.unlink()
    return rename_file(png_path, new_name)


def _ensure_macos_cairo_path() -> None:
    if os.environ.get("DYLD_FALLBACK_LIBRARY_PATH"):
        return

    candidates = ["/opt/homebrew/lib", "/usr/local/lib"]
    existing = [path for path in candidates if Path(path).is_dir()]
    if not existing:
        return

    os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = ":".join(existing)
