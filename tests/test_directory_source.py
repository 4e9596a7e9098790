"""Tests for the directory-backed attachment source."""

import base64

import pytest

from billbridge.infrastructure.attachments.directory_source import DirectoryAttachmentSource, file_type_for


@pytest.fixture()
def root(tmp_path):
    record = tmp_path / "rec-1"
    record.mkdir()
    (record / "b.PDF").write_bytes(b"%PDF")
    (record / "a.txt").write_text("hello")
    (record / "c.weird").write_bytes(b"?")
    (record / "nested").mkdir()
    return tmp_path


def test_discovers_files_sorted_by_name(root):
    found = DirectoryAttachmentSource(root).discover("rec-1")

    assert [(a.name, a.file_type) for a in found] == [
        ("a.txt", "PLAINTEXT"),
        ("b.PDF", "PDF"),
        ("c.weird", "WEIRD"),
    ]


def test_load_returns_base64(root):
    source = DirectoryAttachmentSource(root)
    attachment = source.discover("rec-1")[0]

    loaded = source.load(attachment.attachment_id)

    assert loaded.name == "a.txt"
    assert base64.b64decode(loaded.base64_content) == b"hello"


def test_missing_record_raises(root):
    with pytest.raises(FileNotFoundError):
        DirectoryAttachmentSource(root).discover("nope")


def test_paths_outside_root_rejected(root):
    with pytest.raises(ValueError):
        DirectoryAttachmentSource(root / "rec-1").load("../outside.txt")


@pytest.mark.parametrize(
    "name, expected",
    [("x.jpeg", "JPGIMAGE"), ("x.gz", "GZIP"), ("x.xls", "EXCEL"), ("README", "UNKNOWN")],
)
def test_file_type_for(tmp_path, name, expected):
    assert file_type_for(tmp_path / name) == expected
