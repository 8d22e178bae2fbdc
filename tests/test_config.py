"""Configuration defaults, YAML files and environment overrides."""

import pytest

from bfvm.config import TAPE_LENGTH, InterpreterConfig, load_config
from bfvm.errors import ConfigError


def test_defaults():
    cfg = load_config(env={})
    assert cfg == InterpreterConfig()
    assert cfg.tape_length == TAPE_LENGTH == 30000
    assert cfg.eof_policy == "zero"
    assert cfg.debug_instructions is True
    assert cfg.trailing_newline is True


def test_yaml_file(tmp_path):
    path = tmp_path / "bf.yaml"
    path.write_text("tape_length: 64\neof_policy: unchanged\ntrailing_newline: false\n")
    cfg = load_config(str(path), env={})
    assert cfg.tape_length == 64
    assert cfg.eof_policy == "unchanged"
    assert cfg.trailing_newline is False
    assert cfg.debug_instructions is True


def test_empty_yaml_file_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(str(path), env={}) == InterpreterConfig()


def test_env_overrides_yaml(tmp_path):
    path = tmp_path / "bf.yaml"
    path.write_text("tape_length: 64\n")
    env = {"BF_TAPE_LENGTH": "128", "BF_EOF_POLICY": "MAX", "BF_DEBUG_INSTRUCTIONS": "off"}
    cfg = load_config(str(path), env=env)
    assert cfg.tape_length == 128
    assert cfg.eof_policy == "max"
    assert cfg.debug_instructions is False


def test_empty_env_values_are_ignored():
    assert load_config(env={"BF_TAPE_LENGTH": ""}) == InterpreterConfig()


@pytest.mark.parametrize("text", [
    "tape_length: 0\n",
    "tape_length: lots\n",
    "eof_policy: explode\n",
    "colour: blue\n",
    "trailing_newline: maybe\n",
    "- just\n- a list\n",
])
def test_invalid_yaml_values(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(str(path), env={})


def test_invalid_env_value():
    with pytest.raises(ConfigError):
        load_config(env={"BF_TAPE_LENGTH": "-5"})


def test_eof_value():
    assert InterpreterConfig(eof_policy="zero").eof_value(9) == 0
    assert InterpreterConfig(eof_policy="unchanged").eof_value(9) == 9
    assert InterpreterConfig(eof_policy="max").eof_value(9) == 255
