"""Command‑line interface: **srt-dupes check / completions**

Exit status of ``check``:

* 0 – no repeated subtitles
* 1 – repeated subtitles found (likely Whisper hallucination)
* 2 – input could not be read / parsed
"""
from __future__ import annotations

import argparse, logging, sys
from typing import List, Optional

import shtab  # type: ignore

from . import __version__
from .config import DETECT_CONFIG
from .duplicates import DuplicatePatternDetector
from .json_util import dumps
from .srt_reader import STDIN, SrtReadError, load_subtitle_texts

EXIT_CLEAN = 0
EXIT_REPEATS = 1
EXIT_BAD_INPUT = 2


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be ≥ 1, got {value}")
    return value


def _report(result) -> str:
    if result.count == 0:
        return "No repeated sequences of subtitles found"
    return (
        f"Found {result.count} repeated sequences of subtitles "
        f"length {len(result.sequence)}: {result.sequence!r}"
    )


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_check(ns) -> int:
    try:
        texts = load_subtitle_texts(ns.input)
    except SrtReadError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = DuplicatePatternDetector(max_len=ns.max_len).detect(texts)
    print(dumps(result) if ns.json else _report(result))
    return EXIT_REPEATS if result.count > 0 else EXIT_CLEAN


def cmd_completions(ns) -> int:
    print(shtab.complete(ns.parser, shell=ns.shell))
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="srt-dupes",
        description="Find repeated subtitles (Whisper hallucinations) in SRT files",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = ap.add_subparsers(dest="cmd", required=True)

    # check ----------------------------------------------------------
    sp = sub.add_parser(
        "check",
        help="check if a SRT file has consecutive repeated subtitles",
    )
    sp.add_argument(
        "input", nargs="?", default=STDIN,
        help="the SRT file ('-' for stdin, default)",
    ).complete = shtab.FILE
    sp.add_argument(
        "--max-len", type=_positive_int, default=DETECT_CONFIG["max_len"],
        help=f"longest repeated block to look for (default {DETECT_CONFIG['max_len']})",
    )
    sp.add_argument("--json", action="store_true", help="print the result as JSON")
    sp.set_defaults(func=cmd_check)

    # completions ----------------------------------------------------
    sp = sub.add_parser("completions", help="generate shell completions")
    sp.add_argument("shell", choices=shtab.SUPPORTED_SHELLS,
                    help="the shell to generate the completions for")
    sp.set_defaults(func=cmd_completions)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    ns = ap.parse_args(argv)
    if ns.verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ns.parser = ap
    return ns.func(ns)

if __name__ == "__main__":
    sys.exit(main())
