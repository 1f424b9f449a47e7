import io
import json

import pyarrow.parquet as pq
import pytest

from word_freq.pipeline.count import count_text
from word_freq.writers.base import FrequencyWriter
from word_freq.writers.registry import get_writer, list_writers, register_writer, unregister_writer


def test_text_lines():
    buf = io.StringIO()
    get_writer("text").write(count_text("a b a c b a"), out=buf)
    lines = buf.getvalue().splitlines()
    assert sorted(lines) == ["a: 3", "b: 2", "c: 1"]


def test_text_empty_table_writes_nothing():
    buf = io.StringIO()
    get_writer("text").write(count_text("   \n\t  "), out=buf)
    assert buf.getvalue() == ""


def test_text_defaults_to_stdout(capsys):
    get_writer("text").write(count_text("one"))
    assert capsys.readouterr().out == "one: 1\n"


def test_text_sorted_to_file(tmp_path):
    path = str(tmp_path / "out" / "freq.txt")
    dest = get_writer("text").write(count_text("b a b"), out=path, order="count")
    assert dest == path
    with open(path, encoding="utf-8") as f:
        assert f.read() == "b: 2\na: 1\n"


def test_jsonl_records():
    buf = io.StringIO()
    get_writer("jsonl").write(count_text("café café thé"), out=buf, order="token")
    rows = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert rows == [{"token": "café", "count": 2}, {"token": "thé", "count": 1}]
    assert "café" in buf.getvalue()


def test_parquet_file(tmp_path):
    path = str(tmp_path / "freq.parquet")
    get_writer("parquet").write(count_text("a b a c b a"), out=path)
    table = pq.read_table(path)
    assert table.column_names == ["token", "count"]
    assert dict(zip(table.column("token").to_pylist(), table.column("count").to_pylist())) == {
        "a": 3, "b": 2, "c": 1,
    }


def test_parquet_empty_table(tmp_path):
    path = str(tmp_path / "empty.parquet")
    get_writer("parquet").write(count_text(""), out=path)
    assert pq.read_table(path).num_rows == 0


def test_parquet_needs_path():
    with pytest.raises(ValueError):
        get_writer("parquet").write(count_text("a"), out=io.StringIO())


def test_registry():
    assert set(list_writers()) >= {"text", "jsonl", "parquet"}
    with pytest.raises(KeyError):
        get_writer("xml")
    with pytest.raises(ValueError):
        register_writer("text", get_writer("text"))


def test_register_custom_writer():
    class CSVWriter(FrequencyWriter):
        name = "csv_test"

        def write(self, table, *, out=None, order="none"):
            for tok, n in table.sorted_items(order):
                out.write(f"{tok},{n}\n")
            return "<stream>"

    register_writer("csv_test", CSVWriter())
    try:
        buf = io.StringIO()
        get_writer("csv_test").write(count_text("x y x"), out=buf, order="token")
        assert buf.getvalue() == "x,2\ny,1\n"
    finally:
        unregister_writer("csv_test")
    assert "csv_test" not in list_writers()
