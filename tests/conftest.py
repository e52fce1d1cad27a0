"""Shared test fixtures and configuration."""
import json
import os

import pytest
import yaml


@pytest.fixture
def write_recipes(tmp_path):
    """Write recipe records to a temp file and return its path as a string.

    The suffix picks the format: .json, .yaml/.yml, anything else is written raw.
    """
    def _write(data, name="recipes.json"):
        path = tmp_path / name
        if path.suffix == ".json":
            path.write_text(json.dumps(data), encoding="utf-8")
        elif path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        else:
            path.write_text(str(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep user/project config files and RECIPE_DEDUP_* env vars out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("RECIPE_DEDUP_"):
            monkeypatch.delenv(key)
