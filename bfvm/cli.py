"""
Run a Brainfuck program from a file.

Usage:
    bfvm program.bf
    python -m bfvm.cli --tape-length 100 --eof unchanged program.bf
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from dotenv import load_dotenv

from bfvm.brainfuck import BrainfuckInterpreter
from bfvm.config import EOF_POLICIES, load_config
from bfvm.errors import BrainfuckSyntaxError, ConfigError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfvm", description="Run a Brainfuck program from a file")
    ap.add_argument("files", nargs="*", metavar="FILE", help="Brainfuck source file (exactly one)")
    ap.add_argument("--config", default=None, help="Path to a YAML config file")
    ap.add_argument("--tape-length", type=int, default=None, help="Number of cells on the tape")
    ap.add_argument("--eof", choices=EOF_POLICIES, default=None, help="What ',' stores once input runs out")
    ap.add_argument("--no-debug", action="store_true", help="Ignore '!!' debug instructions")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if len(args.files) != 1:
        ap.print_help()
        return 0

    try:
        cfg = load_config(args.config)
        if args.tape_length is not None:
            cfg = replace(cfg, tape_length=args.tape_length)
        if args.eof is not None:
            cfg = replace(cfg, eof_policy=args.eof)
        if args.no_debug:
            cfg = replace(cfg, debug_instructions=False)
    except (ConfigError, OSError) as e:
        print(f"Invalid configuration: {e}")
        return 1

    filename = args.files[0]
    try:
        with open(filename, "r", encoding="utf-8", errors="replace") as f:
            program = f.read()
    except OSError:
        print(f"File {filename} could not be used")
        return 1

    interpreter = BrainfuckInterpreter(config=cfg)
    try:
        interpreter.run(program, clear_tape=False)
    except BrainfuckSyntaxError as e:
        print(f"File {filename} does not contain a valid Brainfuck program: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
