"""
Interpreter configuration.

Values come from three layers, later ones winning:
    1) InterpreterConfig defaults
    2) a YAML mapping (optional file)
    3) BF_* environment variables
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

import yaml

from bfvm.errors import ConfigError

# Default length of a standard Brainfuck tape, as in Urban Mueller's original.
TAPE_LENGTH = 30000

EOF_POLICIES = ("zero", "unchanged", "max")

ENV_VARS = {
    "tape_length": "BF_TAPE_LENGTH",
    "eof_policy": "BF_EOF_POLICY",
    "debug_instructions": "BF_DEBUG_INSTRUCTIONS",
    "trailing_newline": "BF_TRAILING_NEWLINE",
}


@dataclass(frozen=True)
class InterpreterConfig:
    tape_length: int = TAPE_LENGTH
    eof_policy: str = "zero"  # "zero", "unchanged" or "max"
    debug_instructions: bool = True
    trailing_newline: bool = True

    def __post_init__(self):
        if not isinstance(self.tape_length, int) or isinstance(self.tape_length, bool):
            raise ConfigError(f"tape_length must be an integer, got {self.tape_length!r}")
        if self.tape_length <= 0:
            raise ConfigError(f"tape_length must be positive, got {self.tape_length}")
        if self.eof_policy not in EOF_POLICIES:
            raise ConfigError(
                f"Unknown eof_policy '{self.eof_policy}'. Available: {', '.join(EOF_POLICIES)}"
            )

    def eof_value(self, current: int) -> int:
        """Value stored by ',' once the input is exhausted."""
        if self.eof_policy == "zero":
            return 0
        if self.eof_policy == "max":
            return 255
        return current


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e


def _coerce(values: Mapping[str, Any]) -> Dict[str, Any]:
    known = {f.name for f in fields(InterpreterConfig)}
    out: Dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown config key '{key}'. Available: {', '.join(sorted(known))}")
        if key == "tape_length":
            out[key] = _coerce_int(key, value)
        elif key == "eof_policy":
            out[key] = str(value).strip().lower()
        else:
            out[key] = _coerce_bool(key, value)
    return out


def load_yaml_config(path: str) -> Dict[str, Any]:
    """Read a YAML mapping of config values. An empty file yields {}."""
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> InterpreterConfig:
    """Build an InterpreterConfig from defaults, an optional YAML file and the environment."""
    if env is None:
        env = os.environ

    cfg = InterpreterConfig()
    if path:
        cfg = replace(cfg, **_coerce(load_yaml_config(path)))

    overrides = {key: env[var] for key, var in ENV_VARS.items() if env.get(var) not in (None, "")}
    if overrides:
        cfg = replace(cfg, **_coerce(overrides))
    return cfg
