"""Exceptions raised by the Brainfuck virtual machine."""

from typing import Optional


class BrainfuckSyntaxError(SyntaxError):
    """A program whose loop brackets do not pair up."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnmatchedOpenError(BrainfuckSyntaxError):
    def __init__(self, position: int):
        super().__init__(
            f"Syntax error: opening brace without matching closing brace at position {position}",
            position,
        )


class UnmatchedCloseError(BrainfuckSyntaxError):
    def __init__(self, position: int):
        super().__init__(
            f"Syntax error: closing brace without matched opening brace at position {position}",
            position,
        )


class InterpreterInvariantError(RuntimeError):
    """Internal loop bookkeeping went wrong. Never caused by user programs."""


class ConfigError(ValueError):
    """Invalid interpreter configuration value."""
