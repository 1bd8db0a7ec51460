"""Read and write config.toml and resolve the values render scripts need."""

import os
import tomllib
from pathlib import Path
from typing import Iterable, Mapping

from dotfield.field import frame_index
from dotfield.params import Params
from dotfield.py_helper import variables

ROOT = Path(__file__).resolve().parents[1]


def config_path() -> Path:
    env_path = os.getenv("GEN_CONFIG")
    return Path(env_path) if env_path else ROOT / variables.CONFIG


def output_dir() -> Path:
    env_path = os.getenv("GEN_OUTPUT")
    return Path(env_path) if env_path else Path.cwd() / variables.OUTPUT


def load_toml_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("rb") as f:
        return tomllib.load(f)


def _table(config: Mapping[str, object], name: str) -> dict:
    table = config.get(name)
    if table is None:
        return {}
    if not isinstance(table, dict):
        raise TypeError(f"[{name}] must be a table in config.toml")
    return table


def resolve_seed(config: Mapping[str, object]) -> int:
    env_seed = os.getenv("GEN_SEED")
    if env_seed:
        return int(env_seed)
    style = _table(config, "style")
    if style.get("seed") is not None:
        return int(style["seed"])
    seed_list = style.get("seedlist")
    if isinstance(seed_list, list) and seed_list:
        return int(seed_list[0])
    raise ValueError("Missing [style].seed or [style].seedlist in config.toml")


def resolve_seeds(config: Mapping[str, object]) -> list[int]:
    style = _table(config, "style")
    seed_list = style.get("seedlist")
    if seed_list is None:
        return [resolve_seed(config)]
    if not isinstance(seed_list, list) or not seed_list:
        raise ValueError("[style].seedlist must be a non-empty list in config.toml")
    return [int(value) for value in seed_list]


def resolve_times(config: Mapping[str, object]) -> list[float]:
    style = _table(config, "style")
    times = style.get("times", [0.0])
    if not isinstance(times, list) or not times:
        raise ValueError("[style].times must be a non-empty list in config.toml")
    return [float(value) for value in times]


def resolve_time(config: Mapping[str, object]) -> float:
    env_time = os.getenv("GEN_TIME")
    if env_time:
        return float(env_time)
    return resolve_times(config)[0]


def resolve_size(
    config: Mapping[str, object], fallback: tuple[int, int] = (1200, 1200)
) -> tuple[int, int]:
    style = _table(config, "style")
    width = int(style.get("width", fallback[0]))
    height = int(style.get("height", fallback[1]))
    return width, height


def resolve_colors(
    config: Mapping[str, object], required: Iterable[str] = ("bg", "stroke")
) -> dict[str, str]:
    colors = _table(config, "colors")
    missing = set(required) - set(colors.keys())
    if missing:
        raise ValueError(
            f"Missing colors: {sorted(missing)} under [colors] in config.toml"
        )
    return {key: str(value) for key, value in colors.items()}


def params_from_config(config: Mapping[str, object], seed: int | None = None) -> Params:
    """Params from the [params] table; seed defaults to resolve_seed(config)."""
    data = dict(_table(config, "params"))
    data["seed"] = resolve_seed(config) if seed is None else seed
    return Params.from_dict(data)


def output_name(script_name: str, seed: int, t: float) -> str:
    return f"{script_name}_{seed}_{frame_index(t):05d}"


# -------------------------
# TOML writing
# -------------------------


def _format_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    raise TypeError(f"Unsupported TOML value: {type(value).__name__}")


def _section_lines(name: str, table: dict) -> list[str]:
    lines = [f"[{name}]"]
    for key in sorted(k for k, v in table.items() if not isinstance(v, dict)):
        lines.append(f"    {key} = {_format_value(table[key])}")
    for key, sub in table.items():
        if isinstance(sub, dict):
            lines.append("")
            lines.extend(_section_lines(f"{name}.{key}", sub))
    return lines


def write_toml(data: dict, path: Path) -> None:
    lines: list[str] = []

    root_items = [(k, v) for k, v in data.items() if not isinstance(v, dict)]
    for key, value in root_items:
        lines.append(f"{key} = {_format_value(value)}")
    if root_items:
        lines.append("")

    section_order = [k for k, v in data.items() if isinstance(v, dict)]
    for idx, section in enumerate(section_order):
        lines.extend(_section_lines(section, data[section]))
        if idx != len(section_order) - 1:
            lines.append("")
            lines.append("")

    path.write_text("\n".join(lines).rstrip() + "\n", encoding="utf-8")
