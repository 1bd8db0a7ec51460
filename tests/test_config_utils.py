"""
Tests for config.toml resolution and writing.
"""

import tomllib

import pytest

from dotfield import Params
from dotfield.py_helper.config_utils import (
    config_path,
    load_toml_config,
    output_dir,
    output_name,
    params_from_config,
    resolve_colors,
    resolve_seed,
    resolve_seeds,
    resolve_size,
    resolve_time,
    resolve_times,
    write_toml,
)


class TestResolveSeed:

    def test_env_wins(self, monkeypatch):
        monkeypatch.setenv("GEN_SEED", "31")
        assert resolve_seed({"style": {"seed": 5}}) == 31

    def test_explicit_seed(self):
        assert resolve_seed({"style": {"seed": 5, "seedlist": [9]}}) == 5

    def test_first_of_seedlist(self):
        assert resolve_seed({"style": {"seedlist": [9, 10]}}) == 9

    def test_missing(self):
        with pytest.raises(ValueError):
            resolve_seed({"style": {}})

    def test_style_must_be_table(self):
        with pytest.raises(TypeError):
            resolve_seed({"style": [1, 2]})


class TestResolveSeeds:

    def test_seedlist(self):
        assert resolve_seeds({"style": {"seedlist": [3, "4"]}}) == [3, 4]

    def test_single_seed(self):
        assert resolve_seeds({"style": {"seed": 8}}) == [8]

    def test_empty_seedlist(self):
        with pytest.raises(ValueError):
            resolve_seeds({"style": {"seedlist": []}})


class TestResolveTime:

    def test_default(self):
        assert resolve_times({}) == [0.0]
        assert resolve_time({}) == 0.0

    def test_from_style(self):
        assert resolve_times({"style": {"times": [1, 2.5]}}) == [1.0, 2.5]
        assert resolve_time({"style": {"times": [1, 2.5]}}) == 1.0

    def test_env_wins(self, monkeypatch):
        monkeypatch.setenv("GEN_TIME", "1.25")
        assert resolve_time({"style": {"times": [3.0]}}) == 1.25

    def test_bad_times(self):
        with pytest.raises(ValueError):
            resolve_times({"style": {"times": 3.0}})


def test_resolve_size():
    assert resolve_size({}) == (1200, 1200)
    assert resolve_size({"style": {"width": 640}}, fallback=(100, 200)) == (640, 200)


def test_resolve_colors():
    colors = resolve_colors({"colors": {"bg": "#000000", "stroke": "#ffffff"}})
    assert colors == {"bg": "#000000", "stroke": "#ffffff"}
    with pytest.raises(ValueError, match="stroke"):
        resolve_colors({"colors": {"bg": "#000000"}})


class TestParamsFromConfig:

    def test_bundled_config_is_defaults(self, bundled_config_path):
        config = load_toml_config(bundled_config_path)
        assert params_from_config(config) == Params(seed=1)

    def test_seed_override(self, bundled_config_path):
        config = load_toml_config(bundled_config_path)
        assert params_from_config(config, seed=42).seed == 42

    def test_unknown_param(self):
        config = {"style": {"seed": 1}, "params": {"distribution": {"dots": 3}}}
        with pytest.raises(ValueError):
            params_from_config(config)


def test_paths_follow_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GEN_CONFIG", str(tmp_path / "c.toml"))
    monkeypatch.setenv("GEN_OUTPUT", str(tmp_path / "out"))
    assert config_path() == tmp_path / "c.toml"
    assert output_dir() == tmp_path / "out"


def test_bundled_config_path_exists():
    assert config_path().exists()


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_toml_config(tmp_path / "nope.toml")


def test_output_name():
    assert output_name("dots_svg", 7, 1.25) == "dots_svg_7_00075"


def test_write_toml_round_trip(tmp_path, bundled_config_path):
    config = load_toml_config(bundled_config_path)
    config["style"]["title"] = 'say "hi"'
    path = tmp_path / "out.toml"
    write_toml(config, path)
    with path.open("rb") as f:
        assert tomllib.load(f) == config


def test_write_toml_rejects_unsupported(tmp_path):
    with pytest.raises(TypeError):
        write_toml({"style": {"when": object()}}, tmp_path / "x.toml")
