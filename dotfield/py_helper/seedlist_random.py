"""Generate a random seedlist and store it in config.toml."""

import argparse
import random
from pathlib import Path

from dotfield.py_helper.config_utils import config_path, load_toml_config, write_toml


def write_seedlist(
    path: Path, count: int, min_value: int = 0, max_value: int = 9999,
    rng: random.Random | None = None,
) -> list[int]:
    if count <= 0:
        raise ValueError("count must be a positive integer")
    if min_value > max_value:
        raise ValueError("--min must be <= --max")

    config = load_toml_config(path)

    style = config.get("style")
    if style is None:
        style = {}
    if not isinstance(style, dict):
        raise TypeError("[style] must be a table in config.toml")

    rng = rng or random.Random()
    seeds = [rng.randint(min_value, max_value) for _ in range(count)]
    style["seedlist"] = seeds
    style.pop("seed", None)
    config["style"] = style

    write_toml(config, path)
    return seeds


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Create a random seed list.")
    parser.add_argument("count", type=int, help="How many seeds to generate.")
    parser.add_argument(
        "--min",
        dest="min_value",
        type=int,
        default=0,
        help="Minimum random value (inclusive).",
    )
    parser.add_argument(
        "--max",
        dest="max_value",
        type=int,
        default=9999,
        help="Maximum random value (inclusive).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="config.toml to update (default: $GEN_CONFIG or the bundled one).",
    )
    args = parser.parse_args(argv)

    path = args.config or config_path()
    seeds = write_seedlist(path, args.count, args.min_value, args.max_value)
    print(f"Wrote {len(seeds)} seeds to {path}")


if __name__ == "__main__":
    main()
