from bfvm.brainfuck import BrainfuckInterpreter, validate
from bfvm.bf_runner import run_once, run_program
from bfvm.config import TAPE_LENGTH, InterpreterConfig, load_config
from bfvm.errors import (
    BrainfuckSyntaxError,
    ConfigError,
    InterpreterInvariantError,
    UnmatchedCloseError,
    UnmatchedOpenError,
)

__all__ = [
    "BrainfuckInterpreter",
    "BrainfuckSyntaxError",
    "ConfigError",
    "InterpreterConfig",
    "InterpreterInvariantError",
    "TAPE_LENGTH",
    "UnmatchedCloseError",
    "UnmatchedOpenError",
    "load_config",
    "run_once",
    "run_program",
    "validate",
]
