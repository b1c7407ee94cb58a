from __future__ import annotations

import asyncio
import io
import zipfile

import pytest

from openapi_schema_generator.config import GeneratorConfig
from openapi_schema_generator.errors import DocumentParseError
from openapi_schema_generator.io_utils import (
    discover_json_files,
    is_json_file,
    load_entries,
    read_text_content,
    upload_members,
    zip_members,
)


def test_read_text_content_from_path_and_file_objects(tmp_path):
    p = tmp_path / "a.json"
    p.write_text('{"a": 1}', encoding="utf-8")
    assert read_text_content(str(p)) == '{"a": 1}'
    assert read_text_content(io.BytesIO(b"[1]")) == "[1]"
    assert read_text_content(io.StringIO("null")) == "null"
    with pytest.raises(ValueError):
        read_text_content(None)


def test_is_json_file():
    assert is_json_file("dir/file.json")
    assert not is_json_file("dir/file.txt")


def test_discover_json_files(data_tree):
    found = discover_json_files(str(data_tree))
    relative = [rel for _, rel in found]
    assert relative == [
        "pack/pack.json",
        "pack/loot_tables/chests/temple.json",
        "pack/loot_tables/chests/village.json",
        "pack/recipes/bread.json",
    ]


def test_discover_rejects_missing_directory(tmp_path):
    with pytest.raises(ValueError):
        discover_json_files(str(tmp_path / "missing"))


def test_load_entries_derives_metadata(data_tree):
    entries = asyncio.run(load_entries(discover_json_files(str(data_tree))))
    by_path = {}
    for entry in entries:
        by_path.setdefault(entry.path, []).append(entry)

    assert set(by_path) == {"/pack", "/pack/loot_tables/chests", "/pack/recipes"}
    chests = by_path["/pack/loot_tables/chests"]
    assert len(chests) == 2
    assert {e.name for e in chests} == {"Chests"}
    assert chests[0].tags == ["loot_tables", "loot_tables/chests"]
    assert by_path["/pack"][0].tags == ["pack"]


def test_load_entries_skips_non_json_names():
    files = [(io.StringIO("{}"), "root/a.json"), (io.StringIO("ignored"), "root/readme.md")]
    entries = asyncio.run(load_entries(files))
    assert len(entries) == 1


def test_load_entries_applies_flatten_option():
    files = [(io.StringIO('[{"a": 1}]'), "root/a.json")]
    entries = asyncio.run(load_entries(files, GeneratorConfig(flatten_top_level_arrays=True)))
    assert entries[0].schema.type_counts == {"object": 1}


def test_one_bad_document_fails_the_batch(data_tree):
    (data_tree / "recipes" / "broken.json").write_text("{oops")
    with pytest.raises(DocumentParseError) as exc_info:
        asyncio.run(load_entries(discover_json_files(str(data_tree))))
    assert exc_info.value.source == "pack/recipes/broken.json"


def test_zip_members_keep_archive_layout(upload_cache):
    members = zip_members(str(upload_cache / "3f1a" / "pack.zip"))
    names = sorted(name for _, name in members)
    assert names == [
        "pack/loot_tables/chests/temple.json",
        "pack/loot_tables/chests/village.json",
        "pack/pack.json",
        "pack/recipes/bread.json",
        "pack/recipes/notes.txt",
    ]


def test_zip_members_skip_directories_and_macos_metadata(tmp_path):
    archive = tmp_path / "a.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        zf.writestr("root/", "")
        zf.writestr("root/x.json", "{}")
        zf.writestr("__MACOSX/root/._x.json", "junk")
    assert [name for _, name in zip_members(str(archive))] == ["root/x.json"]


def test_upload_members_ignore_hash_directories(upload_cache):
    loose = upload_cache / "77de" / "bread.json"
    loose.parent.mkdir()
    loose.write_text("{}")
    members = upload_members([str(loose), str(upload_cache / "3f1a" / "pack.zip")])
    assert members[0] == (str(loose), "bread.json")
    assert "pack/recipes/bread.json" in [name for _, name in members[1:]]


def test_invalid_utf8_fails_with_source(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'"\xff"')
    with pytest.raises(DocumentParseError) as exc_info:
        asyncio.run(load_entries([(str(bad), "root/bad.json")]))
    assert exc_info.value.source == "root/bad.json"


def test_invalid_utf8_in_archive_fails_with_source():
    files = [(io.BytesIO(b'{"k": "\xc3"}'), "root/k.json")]
    with pytest.raises(DocumentParseError) as exc_info:
        asyncio.run(load_entries(files))
    assert exc_info.value.source == "root/k.json"
