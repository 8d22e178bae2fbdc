from typing import Optional, Union
from dataclasses import replace

from bfvm.brainfuck import BrainfuckInterpreter
from bfvm.config import InterpreterConfig
from bfvm.errors import BrainfuckSyntaxError
from bfvm.streams import BufferInput, BufferOutput


def run_program(code: str, input_data: Union[str, bytes] = "", config: Optional[InterpreterConfig] = None,
                clear_tape: bool = True) -> str:
    """Execute BF code on in-memory input and return everything it wrote.
    Syntax errors propagate.
    """
    itp = BrainfuckInterpreter(input_stream=BufferInput(input_data), output_stream=BufferOutput(), config=config)
    itp.run(code, clear_tape=clear_tape)
    return itp.output_stream.getvalue()


def run_once(code: str, x: int) -> Optional[int]:
    """Execute BF code with single byte input, return the first output byte.
    Fresh tape each time (stateless). Returns None for invalid code or no output.
    """
    cfg = replace(InterpreterConfig(), trailing_newline=False, debug_instructions=False)
    try:
        s = run_program(code, bytes([x % 256]), config=cfg)
    except BrainfuckSyntaxError:
        return None
    return ord(s[0]) if s else None
