"""
Non-standard runtime instructions.

Special instructions are written "!! instruction" and are not part of
standard Brainfuck. They exist for utilities such as "!! clear", which
clears the tape so several programs can run from a single file.

    clear    clears the tape and resets the pointer to position 0
    print    prints the 11 cells surrounding the pointer
    printnN  prints the N cells surrounding the pointer (N // 2 either side)
"""

import logging
import sys
from dataclasses import dataclass
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

PREFIX = "!! "
PRINT_RADIUS = 5


@dataclass(frozen=True)
class DebugInstruction:
    name: str
    argument: Optional[str] = None  # trailing digits, if any


def parse_debug_instruction(code: str, index: int) -> Optional[DebugInstruction]:
    """Match "!! name[digits]" starting exactly at code[index]."""
    if not code.startswith(PREFIX, index):
        return None

    start = index + len(PREFIX)
    end = start
    while end < len(code) and 'a' <= code[end] <= 'z':
        end += 1
    if end == start:
        return None
    name = code[start:end]

    digits_end = end
    while digits_end < len(code) and '0' <= code[digits_end] <= '9':
        digits_end += 1
    argument = code[end:digits_end] if digits_end > end else None
    return DebugInstruction(name, argument)


def parse_window_size(argument: Optional[str]) -> Optional[int]:
    """Window size for printn, or None when missing or outside a 64-bit int."""
    if not argument:
        return None
    # Reject long digit runs before int() sees them
    if len(argument.lstrip('0')) > len(str(sys.maxsize)):
        return None
    n = int(argument)
    if n > sys.maxsize:
        return None
    return n


def format_cells(tape: np.ndarray, start: int, end: int) -> str:
    """Format cells start..end (inclusive) with their indices.

    Indices outside the tape wrap modulo its length.
    """
    indices = np.arange(start, end + 1) % len(tape)
    values = np.take(tape, indices)
    indices_text = ''.join(f"\t{i}" for i in indices)
    cells_text = "[\t" + ''.join(f"{v}\t" for v in values) + "]"
    return indices_text + "\n" + cells_text


def run_debug_instruction(interpreter, inst: DebugInstruction) -> None:
    """Execute a parsed instruction against an interpreter. Unknown names do nothing."""
    logger.debug("Debug instruction %s (argument=%s) at pointer %d", inst.name, inst.argument, interpreter.pointer)

    if inst.name == "clear":
        interpreter.clear_tape()
    elif inst.name == "print":
        p = interpreter.pointer
        interpreter.output_stream.write_text(
            format_cells(interpreter.tape, p - PRINT_RADIUS, p + PRINT_RADIUS) + "\n"
        )
    elif inst.name == "printn":
        n = parse_window_size(inst.argument)
        if n is None:
            return
        # Wider windows only repeat cells
        half = min(n // 2, len(interpreter.tape))
        p = interpreter.pointer
        interpreter.output_stream.write_text(format_cells(interpreter.tape, p - half, p + half) + "\n")
