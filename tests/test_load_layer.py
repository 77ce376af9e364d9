"""
Test Load Layer - record files and the index artifact
"""

import json
import os
from unittest.mock import patch

import pytest

from conftest import make_doc
from listup_jorei.coreutils.errors import OutputError
from listup_jorei.extract.schemas import JoreiDoc
from listup_jorei.load.local_storage import (
    IndexWriter,
    load_index,
    summarize_index,
    write_record,
)
from listup_jorei.transformation.normalizers import build_index_entry, normalize_detail


def _doc(record_id, title, **overrides):
    return JoreiDoc.model_validate(make_doc(record_id, title, **overrides))


def test_write_record_creates_pretty_json(tmp_path):
    print("🧪 Testing write_record()...")
    output_dir = tmp_path / "output"
    record = normalize_detail(_doc("A001", "札幌市手数料条例"))

    path = write_record(str(output_dir), "A001", record)

    assert path == str(output_dir / "A001.json")
    text = (output_dir / "A001.json").read_text(encoding="utf-8")
    assert "札幌市手数料条例" in text
    assert "\n  " in text
    assert json.loads(text)["id"] == "A001"
    print(f"✅ Saved record to {path}")


def test_write_record_overwrites_existing_file(tmp_path):
    write_record(str(tmp_path), "A001", normalize_detail(_doc("A001", "old")))
    write_record(str(tmp_path), "A001", normalize_detail(_doc("A001", "new")))

    data = json.loads((tmp_path / "A001.json").read_text(encoding="utf-8"))
    assert data["title"] == "new"


def test_write_record_failure_raises_output_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file")

    with pytest.raises(OutputError) as exc_info:
        write_record(str(blocker), "A001", normalize_detail(_doc("A001", "t")))

    assert str(blocker) in str(exc_info.value)


def test_index_writer_only_writes_on_flush(tmp_path):
    index_path = tmp_path / "index.json"
    writer = IndexWriter(str(index_path))

    writer.append(build_index_entry(_doc("A001", "first")))
    writer.append(build_index_entry(_doc("B002", "second")))

    assert not index_path.exists()
    assert len(writer) == 2

    writer.flush()

    data = json.loads(index_path.read_text(encoding="utf-8"))
    assert [e["id"] for e in data] == ["A001", "B002"]
    assert not os.path.exists(f"{index_path}.tmp")


def test_index_writer_flush_twice_is_an_error(tmp_path):
    writer = IndexWriter(str(tmp_path / "index.json"))
    writer.flush()

    with pytest.raises(RuntimeError):
        writer.flush()
    with pytest.raises(RuntimeError):
        writer.append(build_index_entry(_doc("A001", "late")))


def test_empty_index_flushes_empty_list(tmp_path):
    index_path = tmp_path / "index.json"
    IndexWriter(str(index_path)).flush()
    assert json.loads(index_path.read_text(encoding="utf-8")) == []


def test_load_index_and_summarize(tmp_path):
    index_path = tmp_path / "index.json"
    writer = IndexWriter(str(index_path))
    writer.append(build_index_entry(_doc("A001", "a", prefecture="北海道")))
    writer.append(build_index_entry(_doc("B002", "b", prefecture="青森県")))
    writer.append(build_index_entry(_doc("C003", "c", prefecture="北海道")))
    writer.flush()

    df = load_index(str(index_path))
    assert df.height == 3
    assert df["id"].to_list() == ["A001", "B002", "C003"]

    summary = summarize_index(df)
    assert summary["prefecture"].to_list() == ["北海道", "青森県"]
    assert summary["records"].to_list() == [2, 1]


def test_summarize_empty_index(tmp_path):
    index_path = tmp_path / "index.json"
    IndexWriter(str(index_path)).flush()

    summary = summarize_index(load_index(str(index_path)))
    assert summary.height == 0
    assert summary.columns == ["prefecture", "records"]


def test_load_index_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_index(str(tmp_path / "missing.json"))


def test_failed_flush_removes_temp_file(tmp_path):
    index_path = tmp_path / "index.json"
    writer = IndexWriter(str(index_path))
    writer.append(build_index_entry(_doc("A001", "a")))

    def partial_dump(data, f, **kwargs):
        f.write("[{")
        raise OSError("No space left on device")

    with patch("listup_jorei.load.local_storage.json.dump", side_effect=partial_dump):
        with pytest.raises(OutputError):
            writer.flush()

    assert not os.path.exists(f"{index_path}.tmp")
    assert not index_path.exists()
    assert not writer.flushed
