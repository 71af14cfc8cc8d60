"""
test_config_manager.py
----------------------
Tests for YAML/JSON config loading and default merging.
"""

import json

import pytest

from catch_game.core.services import config_manager
from catch_game.core.services.config_manager import load_config
from catch_game.entities.player.player_config import DEFAULT_CONFIG, load_player_config
from catch_game.systems.spawn_manager import DEFAULT_COLLECTIBLE_CONFIG, load_collectible_config


DEFAULTS = {"size": [10, 10], "movement": {"max_speed": [1.0, 2.0], "accel": 0.5}}


# ===========================================================
# File Formats
# ===========================================================

class TestLoadConfig:

    def test_yaml_merges_nested(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("movement:\n  accel: 0.9\n_notes: ignored\n", encoding="utf-8")

        cfg = load_config(str(path), DEFAULTS)

        assert cfg["movement"] == {"max_speed": [1.0, 2.0], "accel": 0.9}
        assert cfg["size"] == [10, 10]
        assert "_notes" not in cfg

    def test_json_overrides(self, tmp_path):
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"size": [3, 4], "extra": True}), encoding="utf-8")

        cfg = load_config(str(path), DEFAULTS)

        assert cfg["size"] == [3, 4]
        assert cfg["extra"] is True
        assert cfg["movement"]["accel"] == 0.5

    def test_defaults_are_not_mutated(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("movement:\n  accel: 7\n", encoding="utf-8")

        cfg = load_config(str(path), DEFAULTS)
        cfg["movement"]["extra"] = 1

        assert DEFAULTS["movement"] == {"max_speed": [1.0, 2.0], "accel": 0.5}

    def test_empty_yaml_yields_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path), DEFAULTS) == DEFAULTS


# ===========================================================
# Failure Handling
# ===========================================================

class TestFailures:

    def test_missing_file_falls_back(self, tmp_path):
        cfg = load_config(str(tmp_path / "nope.yaml"), DEFAULTS)
        assert cfg == DEFAULTS
        assert cfg is not DEFAULTS

    def test_missing_file_strict_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"), DEFAULTS, strict=True)

    def test_malformed_yaml_falls_back(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("movement: [unclosed\n", encoding="utf-8")
        assert load_config(str(path), DEFAULTS) == DEFAULTS

    def test_malformed_json_strict_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(FileNotFoundError):
            load_config(str(path), DEFAULTS, strict=True)

    def test_non_mapping_top_level(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        assert load_config(str(path), DEFAULTS) == DEFAULTS

    def test_no_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "missing.yaml")) == {}


# ===========================================================
# Packaged Configs
# ===========================================================

class TestPackagedConfigs:

    def test_bare_filename_resolves_to_data_root(self):
        path = config_manager._resolve_path("player.yaml")
        assert path.startswith(config_manager.DATA_ROOT)

    def test_player_config_matches_defaults(self):
        cfg = load_player_config()
        assert cfg["size"] == DEFAULT_CONFIG["size"]
        assert cfg["movement"] == DEFAULT_CONFIG["movement"]
        assert "_notes" not in cfg

    def test_collectible_config_matches_defaults(self):
        cfg = load_collectible_config()
        assert cfg["size"] == DEFAULT_COLLECTIBLE_CONFIG["size"]
        assert cfg["fall_speed"] == DEFAULT_COLLECTIBLE_CONFIG["fall_speed"]
