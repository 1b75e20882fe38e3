"""srt-dupes - detect repeated subtitle runs caused by transcription hallucinations."""

__version__ = "0.1.0"
__author__ = "YC Math"

# 주요 클래스들 export
from .config import DETECT_CONFIG, MAX_LEN
from .models import DuplicateResult
from .duplicates import DuplicatePatternDetector, find_duplicates
from .srt_reader import SrtReadError, load_subtitle_texts, parse_subtitles, read_source

__all__ = [
    "DETECT_CONFIG",
    "MAX_LEN",
    "DuplicateResult",
    "DuplicatePatternDetector",
    "find_duplicates",
    "SrtReadError",
    "load_subtitle_texts",
    "parse_subtitles",
    "read_source",
]
