"""Generator registry tests."""

from __future__ import annotations

import pytest

from avsc_codegen.codegen import (
    GeneratorConfig,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from avsc_codegen.codegen.languages.csharp import CSharpGenerator
from avsc_codegen.codegen.languages.python import PythonGenerator
from avsc_codegen.codegen.registry import GeneratorRegistry, RegistryError


def test_builtin_languages_are_registered() -> None:
    assert list_supported_languages() == ["csharp", "python"]


@pytest.mark.parametrize(
    ("language", "generator_class"),
    [
        ("csharp", CSharpGenerator),
        ("cs", CSharpGenerator),
        ("C#", CSharpGenerator),
        ("python", PythonGenerator),
        ("PY", PythonGenerator),
    ],
)
def test_aliases_resolve(language: str, generator_class) -> None:
    assert is_language_supported(language)
    assert isinstance(get_generator(language), generator_class)


def test_unknown_language() -> None:
    assert not is_language_supported("cobol")
    with pytest.raises(RegistryError, match="Available: csharp, python"):
        get_generator("cobol")


def test_language_info() -> None:
    info = get_language_info("cs")

    assert info["name"] == "csharp"
    assert info["class"] == "CSharpGenerator"
    assert info["file_extension"] == ".cs"
    assert info["aliases"] == ["c#", "cs"]
    assert info["config"].language_config["type_keyword"] == "record"
    assert info["templates"] == ["footer.cs.j2", "header.cs.j2", "member.cs.j2"]


def test_config_argument_forms(tmp_path) -> None:
    explicit = GeneratorConfig(indent_size=2)
    path = tmp_path / "codegen.json"
    path.write_text('{"indent_size": 3}', encoding="utf-8")

    assert get_generator("csharp", explicit).config is explicit
    assert get_generator("csharp", {"indent_size": 1}).config.indent_size == 1
    assert get_generator("csharp", str(path)).config.indent_size == 3
    with pytest.raises(RegistryError):
        get_generator("csharp", 42)


def test_register_rejects_non_generators() -> None:
    registry = GeneratorRegistry()

    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_alias_conflicts() -> None:
    registry = GeneratorRegistry()
    registry.register("csharp", CSharpGenerator, aliases=["cs"])

    with pytest.raises(RegistryError):
        registry.register("python", PythonGenerator, aliases=["cs"])
    with pytest.raises(RegistryError):
        registry.register("py", PythonGenerator, aliases=["csharp"])


def test_unregister_removes_aliases() -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator, aliases=["py"])

    registry.unregister("python")

    assert not registry.is_supported("py")
    assert registry.list_languages() == []


def test_existing_registration_is_kept_unless_replaced() -> None:
    registry = GeneratorRegistry()
    registry.register("target", CSharpGenerator)

    registry.register("target", PythonGenerator)
    assert registry.get_generator_class("target") is CSharpGenerator

    registry.register("target", PythonGenerator, replace=True)
    assert registry.get_generator_class("target") is PythonGenerator
