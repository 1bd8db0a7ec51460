"""Run enabled pic_scripts for every seed and time, then post-process output SVGs."""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from dotfield.py_helper import variables
from dotfield.py_helper.config_utils import (
    config_path,
    load_toml_config,
    output_dir,
    output_name,
    params_from_config,
    resolve_colors,
    resolve_seeds,
    resolve_size,
    resolve_times,
)
from dotfield.py_helper.file_utils import publish_svg
from dotfield.py_helper.logging_setup import setup_logging

log = logging.getLogger(__name__)

ROOT: Path = Path(__file__).resolve().parent


def enabled_scripts(config: dict) -> list[str]:
    pic_scripts = config.get("pic_scripts", {})
    if not isinstance(pic_scripts, dict):
        raise TypeError("[pic_scripts] must be a table in config.toml")

    scripts_dir = ROOT / variables.PIC_SCRIPTS
    names = []
    for script_name, enabled in pic_scripts.items():
        if not enabled:
            continue
        script_path = scripts_dir / f"{script_name}.py"
        if not script_path.exists():
            raise FileNotFoundError(script_path)
        names.append(script_name)
    return names


def run_script(script_name: str, seed: int, t: float, cfg_path: Path, out_dir: Path) -> Path:
    env = os.environ.copy()
    env["GEN_SEED"] = str(seed)
    env["GEN_TIME"] = repr(t)
    env["GEN_CONFIG"] = str(cfg_path)
    env["GEN_OUTPUT"] = str(out_dir)

    subprocess.run(
        [sys.executable, "-m", f"dotfield.{variables.PIC_SCRIPTS}.{script_name}"],
        check=True,
        env=env,
    )

    tmp_svg = out_dir / "tmp.svg"
    if not tmp_svg.exists():
        raise FileNotFoundError(tmp_svg)
    return tmp_svg


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render dotfield frames.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.toml.")
    parser.add_argument("--output", type=Path, default=None, help="Output directory.")
    parser.add_argument(
        "--window",
        action="store_true",
        help="Open an animated window for the first seed instead of rendering files.",
    )
    parser.add_argument("--keep-svg", action="store_true", help="Keep SVGs next to PNGs.")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    cfg_path = (args.config or config_path()).resolve()
    out_dir = (args.output or output_dir()).resolve()
    config: dict = load_toml_config(cfg_path)
    seeds = resolve_seeds(config)

    if args.window:
        from dotfield.pic_scripts.window import run_window

        width, height = resolve_size(config, fallback=(900, 900))
        params = params_from_config(config, seed=seeds[0])
        run_window(width, height, f"dotfield seed={params.seed}", params, resolve_colors(config))
        return

    out_dir.mkdir(parents=True, exist_ok=True)
    times = resolve_times(config)

    for script_name in enabled_scripts(config):
        for seed in seeds:
            for t in times:
                tmp_svg = run_script(script_name, seed, t, cfg_path, out_dir)
                png_path = publish_svg(
                    tmp_svg, output_name(script_name, seed, t), keep_svg=args.keep_svg
                )
                log.info("%s seed=%d t=%s -> %s", script_name, seed, t, png_path.name)


if __name__ == "__main__":
    main()
