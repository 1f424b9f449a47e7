import io

import pytest

from word_freq.errors import InputReadError
from word_freq.sources.base import SourceSpec, TextSource
from word_freq.sources.local_file import LocalFileSource
from word_freq.sources.registry import (
    list_sources,
    make_source,
    register_source,
    source_spec_for_path,
    unregister_source,
)
from word_freq.sources.stdin import StdinSource


class TestLocalFileSource:
    def test_reads_whole_file(self, write_text):
        path = write_text("first line\nsecond line\n")
        assert LocalFileSource(SourceSpec(path=path)).read() == "first line\nsecond line\n"

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "nope.txt")
        with pytest.raises(InputReadError) as ei:
            LocalFileSource(SourceSpec(path=path)).read()
        assert ei.value.path == path
        assert path in str(ei.value)
        assert isinstance(ei.value.__cause__, FileNotFoundError)

    def test_directory_is_not_readable(self, tmp_path):
        with pytest.raises(InputReadError):
            LocalFileSource(SourceSpec(path=str(tmp_path))).read()

    def test_undecodable_bytes(self, tmp_path):
        p = tmp_path / "latin1.txt"
        p.write_bytes(b"caf\xe9 au lait")
        with pytest.raises(InputReadError) as ei:
            LocalFileSource(SourceSpec(path=str(p))).read()
        assert "utf-8" in str(ei.value)

    def test_configured_encoding(self, tmp_path):
        p = tmp_path / "latin1.txt"
        p.write_bytes(b"caf\xe9 au lait")
        assert LocalFileSource(SourceSpec(path=str(p), encoding="latin-1")).read() == "café au lait"

    def test_unknown_encoding(self, write_text):
        path = write_text("x")
        with pytest.raises(InputReadError):
            LocalFileSource(SourceSpec(path=path, encoding="no-such-codec")).read()

    def test_metadata(self, write_text):
        path = write_text("abc")
        meta = LocalFileSource(SourceSpec(path=path)).metadata()
        assert meta["kind"] == "local_file"
        assert meta["size_bytes"] == 3


class TestStdinSource:
    def test_text_stream(self):
        src = StdinSource(SourceSpec(path="-", kind="stdin"), stream=io.StringIO("a b a"))
        assert src.read() == "a b a"

    def test_binary_buffer_uses_configured_encoding(self):
        stream = io.TextIOWrapper(io.BytesIO("größe".encode("utf-16")), encoding="ascii")
        src = StdinSource(SourceSpec(path="-", kind="stdin", encoding="utf-16"), stream=stream)
        assert src.read() == "größe"

    def test_undecodable_buffer(self):
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\xfd"), encoding="latin-1")
        src = StdinSource(SourceSpec(path="-", kind="stdin"), stream=stream)
        with pytest.raises(InputReadError):
            src.read()


class TestRegistry:
    def test_spec_for_path(self):
        assert source_spec_for_path("-").kind == "stdin"
        spec = source_spec_for_path("notes.txt", encoding="latin-1")
        assert spec.kind == "local_file"
        assert spec.encoding == "latin-1"

    def test_make_builtin_sources(self):
        assert isinstance(make_source(SourceSpec(path="x.txt")), LocalFileSource)
        assert isinstance(make_source(SourceSpec(path="-", kind="stdin")), StdinSource)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown source kind"):
            make_source(SourceSpec(path="x", kind="ftp"))

    def test_dynamic_registration(self):
        class Fixed(TextSource):
            def __init__(self, spec):
                self.name = "fixed"

            def read(self):
                return "fixed text"

        register_source("fixed", Fixed)
        try:
            assert list_sources()["fixed"] == "dynamic"
            assert make_source(SourceSpec(path="", kind="fixed")).read() == "fixed text"
        finally:
            unregister_source("fixed")
        assert "fixed" not in list_sources()

    def test_cannot_shadow_static_kind(self):
        with pytest.raises(ValueError):
            register_source("local_file", lambda spec: None)
