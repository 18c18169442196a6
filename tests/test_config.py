"""Tests for configuration loading."""

import json
import os

import pytest

from shellbelt.config import BeltConfig, get_config_path
from shellbelt.errors import ConfigError


class TestBeltConfig:

    def test_defaults_when_file_missing(self, isolated_config):
        config = BeltConfig.load()

        assert config.editor == "vim"
        assert config.fuzzy_finder == "fzf"
        assert config.repos_root == os.path.expanduser("~/src")
        assert config.transcript_dir.endswith("transcripts")

    def test_env_var_selects_file(self, isolated_config):
        assert get_config_path() == isolated_config

    def test_save_and_load(self, isolated_config):
        BeltConfig(editor="nano", p4_root="/work/p4").save()

        loaded = BeltConfig.load()

        assert loaded.editor == "nano"
        assert loaded.p4_root == "/work/p4"

    def test_unknown_keys_are_ignored(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"editor": "micro", "colour": "blue"}))

        assert BeltConfig.load().editor == "micro"

    def test_tilde_is_expanded(self):
        config = BeltConfig.from_dict({"ssh_key": "~/.ssh/other.pub"})
        assert config.ssh_key == os.path.expanduser("~/.ssh/other.pub")

    def test_malformed_file_raises(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")

        with pytest.raises(ConfigError):
            BeltConfig.load()

    def test_non_object_raises(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("[]")

        with pytest.raises(ConfigError):
            BeltConfig.load()

    def test_null_values_fall_back_to_defaults(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"ssh_client": None, "editor": None}))

        config = BeltConfig.load()

        assert config.ssh_client in ("ssh", "plink")
        assert config.editor == "vim"
