"""Batch generation tests."""

from __future__ import annotations

from avsc_codegen.codegen import get_generator
from avsc_codegen.codegen.core.generator import DiagnosticKind
from avsc_codegen.codegen.core.schema import SchemaDocument
from avsc_codegen.pipeline import GenerationCache, content_hash, generate_all, write_results
from conftest import record_schema


def _documents(make_document) -> list[SchemaDocument]:
    return [
        make_document(
            record_schema(name=f"Record{i}", fields=[{"name": "id", "type": "string"}]),
            name=f"record{i}",
        )
        for i in range(6)
    ]


def test_results_keep_input_order(make_document) -> None:
    documents = _documents(make_document)

    results = generate_all(get_generator("csharp"), documents, max_workers=3)

    assert [r.document_name for r in results] == [d.name for d in documents]
    assert [r.generated.artifact_name for r in results] == [
        f"My.App.Record{i}.g.cs" for i in range(6)
    ]


def test_bad_document_does_not_affect_others(make_document) -> None:
    documents = [
        make_document(record_schema(fields=[{"name": "a", "type": "string"}]), name="good"),
        make_document("{ not json", name="broken"),
        make_document({"type": "enum", "name": "E", "symbols": ["A"]}, name="enum"),
        make_document(
            record_schema(fields=[{"name": "a", "type": "string", "default": 1}]),
            name="bad_default",
        ),
    ]

    results = generate_all(get_generator("python"), documents)

    assert [r.success for r in results] == [True, False, False, False]
    assert results[3].diagnostics_of(DiagnosticKind.INVALID_DEFAULT)


def test_cache_reuses_results_by_content(make_document) -> None:
    documents = _documents(make_document)
    cache = GenerationCache()
    generator = get_generator("csharp")

    first = generate_all(generator, documents, cache=cache)
    second = generate_all(generator, documents, cache=cache)

    assert first == second
    assert len(cache) == 6
    assert (cache.misses, cache.hits) == (6, 6)


def test_content_hash_depends_only_on_content() -> None:
    a = SchemaDocument(name="a", content='{"type": "string"}')
    b = SchemaDocument(name="b", content='{"type": "string"}')
    c = SchemaDocument(name="a", content='{"type": "boolean"}')

    assert content_hash(a) == content_hash(b)
    assert content_hash(a) != content_hash(c)
    assert len(content_hash(a)) == 64


def test_write_results(tmp_path, make_document) -> None:
    documents = _documents(make_document)[:2] + [make_document("[]", name="empty")]
    results = generate_all(get_generator("csharp"), documents)

    written = write_results(results, tmp_path / "out")

    assert [p.name for p in written] == ["My.App.Record0.g.cs", "My.App.Record1.g.cs"]
    assert written[0].read_text(encoding="utf-8") == results[0].generated.source_text


def test_write_results_keeps_first_of_duplicate_artifacts(tmp_path, make_document) -> None:
    schema = record_schema(fields=[{"name": "a", "type": "string"}])
    other = record_schema(fields=[{"name": "b", "type": "string"}])
    results = generate_all(
        get_generator("csharp"),
        [make_document(schema, name="first"), make_document(other, name="second")],
    )

    written = write_results(results, tmp_path)

    assert len(written) == 1
    assert '"a"' in written[0].read_text(encoding="utf-8")


def test_deeply_nested_document_does_not_abort_batch(make_document) -> None:
    depth = 200_000
    documents = [
        make_document(record_schema(fields=[{"name": "a", "type": "string"}]), name="good"),
        make_document("[" * depth + "]" * depth, name="deep"),
    ]

    results = generate_all(get_generator("csharp"), documents, cache=GenerationCache())

    assert [r.success for r in results] == [True, False]
    assert results[0].generated.artifact_name == "My.App.User.g.cs"


def test_unpaired_surrogates_are_written(tmp_path, make_document) -> None:
    documents = [
        make_document(
            record_schema(
                name="Odd",
                fields=[{"name": "label", "type": "string", "default": "x\ud800"}],
                doc="odd \udc00 text",
            ),
            name="odd",
        ),
        make_document(record_schema(fields=[{"name": "a", "type": "string"}]), name="good"),
    ]

    written = write_results(generate_all(get_generator("csharp"), documents), tmp_path)

    assert [p.name for p in written] == ["My.App.Odd.g.cs", "My.App.User.g.cs"]
    assert '= "x\\ud800";' in written[0].read_text(encoding="utf-8")
