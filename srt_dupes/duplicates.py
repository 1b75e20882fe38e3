"""Detect a short block of items that is immediately repeated.

Whisper-style transcription models tend to hallucinate by repeating the same
subtitle (or the same two or three subtitles) over and over. The detector
looks for the longest such *doubled run* of up to ``max_len`` items and then
counts how often that exact block occurs, without overlap, from the start of
that run to the end of the input.

Tie-break rule: a candidate only replaces the current best when it is
*strictly* longer, so among equal-length doubled runs the one starting at
the smallest index wins. Blocks that are themselves a shorter block repeated
(``[a, a]``, ``[a, b, a, b]``) are not candidates: a run of one line gives
``[a]``, not ``[a, a, a]``.
"""
from __future__ import annotations
import logging
from typing import Any, List, Sequence, Tuple

from .config import DETECT_CONFIG, MAX_LEN
from .models import DuplicateResult

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("srt_dupes.duplicates")
LOGGER.addHandler(logging.NullHandler())


class DuplicatePatternDetector:
    def __init__(self, max_len: int = DETECT_CONFIG["max_len"]):
        if isinstance(max_len, bool) or not isinstance(max_len, int) or max_len < 1:
            raise ValueError(f"max_len must be a positive integer, got {max_len!r}")
        self.max_len = max_len

    # ------------------------------------------------------------------
    def detect(self, items: Sequence[Any]) -> DuplicateResult:
        start, pattern = self._longest_doubled_run(items)
        if not pattern:
            LOGGER.debug("no doubled run in %d items", len(items))
            return DuplicateResult()

        count = self._count_occurrences(items, pattern, start)
        LOGGER.debug(
            "pattern of length %d (first doubled at %d) occurs %d times",
            len(pattern), start, count,
        )
        return DuplicateResult(sequence=pattern, count=count)

    # ── 1단계: 후보 탐색 ────────────────────────────────
    def _longest_doubled_run(self, items: Sequence[Any]) -> Tuple[int, List[Any]]:
        n = len(items)
        best_start, best = 0, []
        for i in range(n):
            for length in range(1, self.max_len + 1):
                if i + 2 * length > n:
                    break
                if length <= len(best):
                    continue  # 같은 길이면 먼저 찾은 후보 유지
                block = items[i : i + length]
                if not _is_primitive(block):
                    continue  # [x, x] 같은 블록은 [x] 의 반복
                if _same(block, items[i + length : i + 2 * length]):
                    best_start, best = i, list(block)
        return best_start, best

    # ── 2단계: 비중첩 출현 횟수 ─────────────────────────
    @staticmethod
    def _count_occurrences(items: Sequence[Any], pattern: List[Any], start: int = 0) -> int:
        length = len(pattern)
        count, i = 0, start
        while i + length <= len(items):
            if _same(items[i : i + length], pattern):
                count += 1
                i += length  # 매칭 블록은 건너뜀
            else:
                i += 1
        return count


def _is_primitive(block: Sequence[Any]) -> bool:
    """False if *block* is a shorter block repeated, e.g. ``[a, a]`` or ``[a, b, a, b]``."""
    n = len(block)
    for d in range(1, n):
        if n % d == 0 and all(block[k] == block[k % d] for k in range(d, n)):
            return False
    return True


def _same(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Element-wise ``==`` so tuples, lists and other sequences compare alike."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def find_duplicates(items: Sequence[Any], max_len: int = MAX_LEN) -> DuplicateResult:
    """Shortcut for ``DuplicatePatternDetector(max_len).detect(items)``.

    >>> find_duplicates([1, 2, 3, 1, 3, 2, 1, 3, 1, 3])
    DuplicateResult(sequence=[1, 3], count=2)
    """
    return DuplicatePatternDetector(max_len).detect(items)
