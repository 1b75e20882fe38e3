"""Input side of ``srt-dupes check``: SRT file / stdin → list of subtitle texts.

Parsing is delegated to **pysrt** in raising mode so that a broken file is
reported as :class:`SrtReadError` instead of silently turning into an empty
(and therefore "clean") subtitle list.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import List

import pysrt  # type: ignore
from pysrt.srtexc import Error as PysrtError  # type: ignore

LOGGER = logging.getLogger("srt_dupes.srt_reader")
LOGGER.addHandler(logging.NullHandler())

STDIN = "-"
_BOM = "\ufeff"


class SrtReadError(RuntimeError):
    """Raised when subtitle input cannot be read or parsed."""
    pass


def read_source(source: str = STDIN) -> str:
    """Return the raw text of *source* (``"-"`` means standard input)."""
    try:
        if source == STDIN:
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        name = "<stdin>" if source == STDIN else source
        raise SrtReadError(f"cannot read {name}: {e}") from e
    return text[1:] if text.startswith(_BOM) else text


def parse_subtitles(text: str) -> List[str]:
    """Parse SRT *text* and return the text of every entry in file order."""
    if not text.strip():
        return []
    try:
        subs = pysrt.from_string(text, error_handling=pysrt.SubRipFile.ERROR_RAISE)
    except PysrtError as e:
        # pysrt: args = (line index, …, offending block)
        line = e.args[0] if e.args else "?"
        raise SrtReadError(f"invalid SRT block near line {line}") from e
    texts = [item.text for item in subs]
    LOGGER.debug("parsed %d subtitles", len(texts))
    return texts


def load_subtitle_texts(source: str = STDIN) -> List[str]:
    return parse_subtitles(read_source(source))
