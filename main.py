# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List, Sequence, TextIO

from debug import COMPONENTS, Debug
from enigma import Enigma
from errors import EnigmaError, ErrorCode, InsufficientParametersError
from utilities import (
    build_from_config,
    build_machine,
    load_config,
    preprocess_message,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for one run of the command line tool."""

    block: int = 0                  # group output in blocks of N (0 = off)
    clean: bool = False             # drop non-letters instead of failing
    debug: List[str] | None = None  # components to log; [] means all
    log_file: str | None = None     # also write the debug log here

    def make_debug(self) -> Debug:
        if self.debug is None:
            return Debug.quiet()
        return Debug(*self.debug, log_to=self.log_file)


# ────────────────────────────────────────────────────────────────────────
#  1. Machine assembly & enciphering
# ────────────────────────────────────────────────────────────────────────


def assemble(files: Sequence[str], config_path: str | None, debug: Debug) -> Enigma:
    """Files are PLUGBOARD REFLECTOR [ROTOR ...] POSITIONS, rotors leftmost first."""
    if config_path:
        return build_from_config(load_config(config_path), debug)

    if len(files) < 3:
        raise InsufficientParametersError(
            "Insufficient number of parameters: need a plugboard, a reflector "
            "and a positions file"
        )
    plugboard, reflector, *rotors, positions = files
    return build_machine(plugboard, reflector, rotors, positions, debug)


def encipher_stream(machine: Enigma, message: str, cfg: Config, out: TextIO) -> int:
    """Write each enciphered letter as soon as it is produced.

    Whitespace is skipped. Returns the number of letters written; anything
    already written stays written if a bad character stops the run.
    """
    if cfg.clean:
        message = preprocess_message(message)

    count = 0
    try:
        for ch in message:
            if ch.isspace():
                continue
            letter = machine.process(ch)
            if cfg.block and count and count % cfg.block == 0:
                out.write(" ")
            out.write(letter)
            count += 1
    finally:
        if count:
            out.write("\n")
        out.flush()
    return count


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="enigma-sim",
        description="Encrypt or decrypt with a rotor cipher machine. "
        "Files: PLUGBOARD REFLECTOR [ROTOR ...] POSITIONS (rotors leftmost first).",
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="Plugboard, reflector, rotor and positions files.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of separate files.")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. Read from stdin when omitted.")
    p.add_argument("--clean", action="store_true", help="Upper-case the message and drop non-letters instead of failing.")
    p.add_argument("--block", type=int, default=0, metavar="N", help="Group output in blocks of N letters. Default: 0 (off)")
    p.add_argument(
        "--debug", nargs="*", choices=COMPONENTS, metavar="COMPONENT",
        help=f"Log internals of the named components ({', '.join(COMPONENTS)}); all when none are named.",
    )
    p.add_argument("--log-file", metavar="FILE", help="Also write the debug log to FILE.")
    args = p.parse_args(argv)
    if args.config and args.files:
        p.error("--config cannot be combined with configuration files")
    if args.block < 0:
        p.error("--block must not be negative")
    return args


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = Config(
        block=args.block,
        clean=args.clean,
        debug=args.debug,
        log_file=args.log_file,
    )

    try:
        machine = assemble(args.files, args.config, cfg.make_debug())
        message = args.message if args.message is not None else sys.stdin.read()
        encipher_stream(machine, message, cfg, sys.stdout)
    except EnigmaError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return int(exc.code)

    return int(ErrorCode.NO_ERROR)


if __name__ == "__main__":
    sys.exit(main())
