"""Shared fixtures for the dotfield tests."""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from dotfield import Params
from dotfield.py_helper.config_utils import ROOT, load_toml_config, write_toml
from dotfield.py_helper import variables


@pytest.fixture(autouse=True)
def clean_gen_env(monkeypatch):
    """Render env overrides from the shell must not leak into tests."""
    for name in ("GEN_SEED", "GEN_TIME", "GEN_CONFIG", "GEN_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def small_params():
    """Default field with a dot count small enough for quick tests."""
    params = Params()
    return replace(params, distribution=replace(params.distribution, dot_count=500))


@pytest.fixture
def bundled_config_path() -> Path:
    return ROOT / variables.CONFIG


@pytest.fixture
def tmp_config(tmp_path, bundled_config_path) -> Path:
    """Copy of the bundled config with a small dot count and one seed/time."""
    config = load_toml_config(bundled_config_path)
    config["style"]["seedlist"] = [7]
    config["style"]["times"] = [0.5]
    config["style"]["width"] = 200
    config["style"]["height"] = 200
    config["params"]["distribution"]["dot_count"] = 300
    path = tmp_path / "config.toml"
    write_toml(config, path)
    return path
