#!/usr/bin/env python
"""Setup script for srt-dupes.

반복 자막(Whisper 환각) 탐지 도구 설치 스크립트
"""
from pathlib import Path
from setuptools import setup, find_packages

# 프로젝트 루트 디렉토리
here = Path(__file__).parent.resolve()

# README 읽기
long_description = (here / "README.md").read_text(encoding="utf-8")

# 버전 정보 읽기 (간단한 방법)
version = "0.1.0"

setup(
    name="srt-dupes",
    version=version,
    author="YC Math",
    author_email="your-email@example.com",
    description="Detect repeated subtitle runs (Whisper hallucinations) in SRT files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ycmath/srt-dupes",
    project_urls={
        "Bug Tracker": "https://github.com/ycmath/srt-dupes/issues",
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Multimedia :: Video",
        "Topic :: Text Processing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="srt subtitles whisper hallucination repetition",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    python_requires=">=3.8",

    # 기본 의존성
    install_requires=[
        "orjson>=3.8.0",
        "pysrt>=1.1.2",
        "shtab>=1.6.0",
    ],

    # 선택적 의존성
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "hypothesis>=6.0.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    # CLI 엔트리 포인트
    entry_points={
        "console_scripts": [
            "srt-dupes=srt_dupes.cli:main",
        ],
    },

    package_data={
        "srt_dupes": ["py.typed"],  # 타입 힌트 지원
    },
    include_package_data=True,
)
