"""srt-dupes 기본 탐지 파라미터"""
MAX_LEN = 3  # 반복 블록 최대 길이 (4 이상은 탐지하지 않음)

DETECT_CONFIG = {
    "max_len": MAX_LEN,
}
