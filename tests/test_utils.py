"""Schema document loading tests."""

from __future__ import annotations

import pytest
import requests

from avsc_codegen import translate, utils
from avsc_codegen.utils import (
    SchemaLoaderError,
    document_name_for,
    iter_schema_paths,
    load_schema_documents,
    load_schema_from_file,
    load_schema_from_url,
)


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code
        self.encoding = None

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def test_load_schema_from_file(tmp_path) -> None:
    path = tmp_path / "user.avsc"
    path.write_text('{"type": "string"}', encoding="utf-8")

    document = load_schema_from_file(path)

    assert document.name == "user"
    assert document.content == '{"type": "string"}'


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_schema_from_file(tmp_path / "nope.avsc")


def test_non_utf8_file(tmp_path) -> None:
    path = tmp_path / "latin.avsc"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(SchemaLoaderError, match="not UTF-8"):
        load_schema_from_file(path)


def test_directories_are_searched_recursively_by_suffix(tmp_path) -> None:
    (tmp_path / "nested").mkdir()
    (tmp_path / "a.avsc").write_text("{}", encoding="utf-8")
    (tmp_path / "nested" / "b.AVSC").write_text("{}", encoding="utf-8")
    (tmp_path / "nested" / "c.json").write_text("{}", encoding="utf-8")
    (tmp_path / "readme.txt").write_text("", encoding="utf-8")

    paths = iter_schema_paths([tmp_path])

    assert [p.name for p in paths] == ["a.avsc", "b.AVSC"]
    assert [p.name for p in iter_schema_paths([tmp_path], suffixes=[".json"])] == ["c.json"]


def test_files_named_directly_are_filtered_and_deduplicated(tmp_path) -> None:
    schema = tmp_path / "a.avsc"
    schema.write_text("{}", encoding="utf-8")
    other = tmp_path / "notes.md"
    other.write_text("", encoding="utf-8")

    documents = load_schema_documents([schema, other, tmp_path])

    assert [d.name for d in documents] == ["a"]


def test_missing_path_in_discovery(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        iter_schema_paths([tmp_path / "gone"])


def test_document_name_for_urls_and_paths() -> None:
    assert document_name_for("https://example.com/schemas/user.avsc?v=2") == "user"
    assert document_name_for("schemas/order.avsc") == "order"


def test_load_schema_from_url(monkeypatch) -> None:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse('{"type": "string"}')

    monkeypatch.setattr(utils.requests, "get", fake_get)

    document = load_schema_from_url("https://example.com/schemas/user.avsc", timeout=5)

    assert document.name == "user"
    assert document.content == '{"type": "string"}'
    assert calls == [("https://example.com/schemas/user.avsc", 5)]


def test_url_errors_become_loader_errors(monkeypatch) -> None:
    def timeout_get(url, timeout):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr(utils.requests, "get", timeout_get)
    with pytest.raises(SchemaLoaderError, match="timeout"):
        load_schema_from_url("https://example.com/user.avsc")

    monkeypatch.setattr(utils.requests, "get", lambda url, timeout: _FakeResponse("", 404))
    with pytest.raises(SchemaLoaderError, match="HTTP error 404"):
        load_schema_from_url("https://example.com/user.avsc")


def test_invalid_url() -> None:
    with pytest.raises(SchemaLoaderError, match="Invalid URL"):
        load_schema_from_url("not a url")


def test_byte_order_mark_is_dropped(tmp_path, monkeypatch) -> None:
    schema = '{"type": "record", "name": "User", "namespace": "my.app", "fields": []}'
    path = tmp_path / "user.avsc"
    path.write_bytes(b"\xef\xbb\xbf" + schema.encode("utf-8"))

    assert load_schema_from_file(path).content == schema

    monkeypatch.setattr(
        utils.requests, "get", lambda url, timeout: _FakeResponse("\ufeff" + schema)
    )
    assert load_schema_from_url("https://example.com/user.avsc").content == schema


def test_byte_order_mark_file_translates(tmp_path) -> None:
    schema = (
        '{"type": "record", "name": "User", "namespace": "my.app",'
        ' "fields": [{"name": "id", "type": "string"}]}'
    )
    path = tmp_path / "user.avsc"
    path.write_bytes(b"\xef\xbb\xbf" + schema.encode("utf-8"))

    generated = translate(load_schema_from_file(path))

    assert generated is not None
    assert generated.artifact_name == "My.App.User.g.cs"
