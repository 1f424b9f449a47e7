import pytest


@pytest.fixture
def write_text(tmp_path):
    """Write `content` to a file under tmp_path and return its path as str."""
    def _write(content, name="input.txt", encoding="utf-8"):
        p = tmp_path / name
        p.write_text(content, encoding=encoding)
        return str(p)
    return _write
