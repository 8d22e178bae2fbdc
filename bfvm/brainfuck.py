#!/usr/bin/env python3
"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the character signified by the cell at the pointer
    ,   Input a character and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

"!! instruction" runs one of the debug instructions in
bfvm.debug_instructions. All other characters are treated as comments.

The tape is circular: moving off either end wraps to the other.
"""

import logging
from typing import List, Optional

import numpy as np

from bfvm.config import InterpreterConfig
from bfvm.debug_instructions import parse_debug_instruction, run_debug_instruction
from bfvm.errors import InterpreterInvariantError, UnmatchedCloseError, UnmatchedOpenError
from bfvm.streams import StreamInput, StreamOutput

logger = logging.getLogger(__name__)


def validate(code: str) -> None:
    """Check that every '[' has a matching ']' and vice versa.

    Raises UnmatchedCloseError on the first ']' without an opener, or
    UnmatchedOpenError for the innermost '[' left open at the end.
    """
    stack: List[int] = []
    for i, cmd in enumerate(code):
        if cmd == '[':
            stack.append(i)
        elif cmd == ']':
            if not stack:
                raise UnmatchedCloseError(i)
            stack.pop()

    if stack:
        raise UnmatchedOpenError(stack[-1])


class BrainfuckInterpreter:
    """Owns a tape and data pointer; each run() owns its instruction pointer and loop stack."""

    def __init__(self, tape_length: Optional[int] = None, input_stream=None, output_stream=None,
                 config: Optional[InterpreterConfig] = None):
        self.config = config or InterpreterConfig()
        self.tape_length = tape_length if tape_length is not None else self.config.tape_length
        if self.tape_length <= 0:
            raise ValueError(f"tape_length must be positive, got {self.tape_length}")
        self.input_stream = input_stream if input_stream is not None else StreamInput()
        self.output_stream = output_stream if output_stream is not None else StreamOutput()
        self.tape = np.zeros(self.tape_length, dtype=np.uint8)
        self.pointer = 0

    def clear_tape(self) -> None:
        """Zero every cell and reset the pointer to 0."""
        self.tape.fill(0)
        self.pointer = 0
        logger.debug("Tape cleared (%d cells)", self.tape_length)

    @property
    def cell(self) -> int:
        return int(self.tape[self.pointer])

    def move_left(self) -> None:
        if self.pointer == 0:
            self.pointer = self.tape_length - 1
        else:
            self.pointer -= 1

    def move_right(self) -> None:
        if self.pointer == self.tape_length - 1:
            self.pointer = 0
        else:
            self.pointer += 1

    def increment(self) -> None:
        self.tape[self.pointer] = (self.cell + 1) % 256

    def decrement(self) -> None:
        self.tape[self.pointer] = (self.cell - 1) % 256

    def output(self) -> None:
        self.output_stream.write_char(self.cell)

    def input(self) -> None:
        value = self.input_stream.read_char()
        if value is None:
            value = self.config.eof_value(self.cell)
        self.tape[self.pointer] = value % 256

    def open_loop(self, pos: int, loop_stack: List[int]) -> bool:
        """Enter the loop opened at pos. Returns True if its body must be skipped."""
        if self.cell == 0:
            return True
        loop_stack.append(pos)
        return False

    def close_loop(self, loop_stack: List[int]) -> Optional[int]:
        """Leave the current loop body.

        Returns the position of the matching '[' when the loop must repeat,
        or None when it exits.
        """
        if not loop_stack:
            raise InterpreterInvariantError("']' executed with an empty loop stack")
        origin = loop_stack.pop()
        if self.cell == 0:
            return None
        return origin

    @staticmethod
    def _skip_loop(code: str, index: int) -> int:
        """Index of the ']' matching the '[' at index."""
        depth = 1
        while depth:
            index += 1
            if code[index] == '[':
                depth += 1
            elif code[index] == ']':
                depth -= 1
        return index

    def run(self, code: str, clear_tape: bool = False) -> None:
        """Validate and execute code, clearing the tape first if clear_tape is set."""
        validate(code)

        if clear_tape:
            self.clear_tape()

        logger.debug("Running program of %d characters (pointer=%d)", len(code), self.pointer)

        loop_stack: List[int] = []
        index = 0
        code_len = len(code)

        while index < code_len:
            cmd = code[index]

            if cmd == '<':
                self.move_left()
            elif cmd == '>':
                self.move_right()
            elif cmd == '+':
                self.increment()
            elif cmd == '-':
                self.decrement()
            elif cmd == '.':
                self.output()
            elif cmd == ',':
                self.input()
            elif cmd == '[':
                if self.open_loop(index, loop_stack):
                    index = self._skip_loop(code, index)
            elif cmd == ']':
                origin = self.close_loop(loop_stack)
                if origin is not None:
                    # Land on the '[' after the advance so the condition is re-tested
                    index = origin - 1
            elif cmd == '!' and self.config.debug_instructions:
                inst = parse_debug_instruction(code, index)
                if inst is not None:
                    run_debug_instruction(self, inst)

            index += 1

        if loop_stack:
            raise InterpreterInvariantError(f"Loop stack not empty at end of program: {loop_stack}")

        if self.config.trailing_newline:
            self.output_stream.write_text("\n")
