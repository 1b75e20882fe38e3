import pytest


@pytest.fixture
def srt_file(tmp_path):
    def _write(text, name="subs.srt", encoding="utf-8"):
        p = tmp_path / name
        p.write_text(text, encoding=encoding)
        return p
    return _write
