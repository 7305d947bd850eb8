import json

import pytest

from mix_uncertainty.config.loader import load_config_file, load_config_with_precedence
from mix_uncertainty.exceptions import ConfigValidationError

DEFAULTS = {"min_positive": 5, "floor": 1e-6, "redistribution": "proportional"}
CASTERS = {"min_positive": int, "floor": float}


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    cfg_path = tmp_path / "prep.yaml"
    cfg_path.write_text("min_positive: 7\nfloor: 0.001\nredistribution: even\n")
    monkeypatch.setenv("MIXU_FLOOR", "0.01")

    merged = load_config_with_precedence(
        config_path=cfg_path,
        env_prefix="MIXU_",
        cli_values={"min_positive": 9, "floor": None},
        defaults=DEFAULTS,
        casters=CASTERS,
    )
    assert merged == {"min_positive": 9, "floor": 0.01, "redistribution": "even"}


def test_defaults_used_without_sources(monkeypatch):
    monkeypatch.delenv("MIXU_FLOOR", raising=False)
    merged = load_config_with_precedence(None, "MIXU_", {}, DEFAULTS, CASTERS)
    assert merged == DEFAULTS


def test_json_file_supported(tmp_path):
    path = tmp_path / "prep.json"
    path.write_text(json.dumps({"min_positive": 6}))
    assert load_config_file(path) == {"min_positive": 6}


def test_bad_env_value_rejected(monkeypatch):
    monkeypatch.setenv("MIXU_MIN_POSITIVE", "five")
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(None, "MIXU_", {}, DEFAULTS, CASTERS)


@pytest.mark.parametrize("name,content", [("prep.toml", "x = 1"), ("prep.yaml", "- 1\n- 2\n"), ("prep.json", "{bad")])
def test_unusable_files_rejected(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(ConfigValidationError):
        load_config_file(path)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(ConfigValidationError):
        load_config_file(tmp_path / "absent.yaml")
