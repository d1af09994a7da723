"""Name normalization tests."""

from __future__ import annotations

import pytest

from avsc_codegen.codegen.core.naming import (
    NameSanitizer,
    NamingCase,
    convert_case,
    convert_namespace,
    normalize_identifier,
    normalize_namespace,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("my.app", "My.App"),
        ("com/example_app.v1", "Com/ExampleApp.V1"),
        ("my-app.some data", "MyApp.SomeData"),
        ("Already.Pascal", "Already.Pascal"),
        ("", ""),
    ],
)
def test_normalize_namespace(raw: str, expected: str) -> None:
    assert normalize_namespace(raw) == expected


def test_normalize_namespace_keeps_delimiters_in_place() -> None:
    assert normalize_namespace("a/b.c") == "A/B.C"
    assert normalize_namespace("a..b") == "A..B"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("full_name", "FullName"),
        ("fullName", "FullName"),
        ("user-id", "UserId"),
        ("User", "User"),
        ("userID", "UserID"),
        ("2fa_enabled", "_2faEnabled"),
        ("", "Field"),
        ("___", "Field"),
    ],
)
def test_normalize_identifier(raw: str, expected: str) -> None:
    assert normalize_identifier(raw) == expected


@pytest.mark.parametrize(
    "raw", ["full_name", "my.app", "2fa_enabled", "com/example_app.v1", "X", "a b-c"]
)
def test_normalization_is_idempotent(raw: str) -> None:
    assert normalize_namespace(normalize_namespace(raw)) == normalize_namespace(raw)
    assert normalize_identifier(normalize_identifier(raw)) == normalize_identifier(raw)


@pytest.mark.parametrize(
    ("raw", "case", "expected"),
    [
        ("fullName", NamingCase.SNAKE_CASE, "full_name"),
        ("FullName", NamingCase.SNAKE_CASE, "full_name"),
        ("full-name", NamingCase.SNAKE_CASE, "full_name"),
        ("123abc", NamingCase.SNAKE_CASE, "_123abc"),
        ("full_name", NamingCase.CAMEL_CASE, "fullName"),
        ("full_name", NamingCase.PASCAL_CASE, "FullName"),
        ("fullName", NamingCase.SCREAMING_SNAKE, "FULL_NAME"),
        ("fullName", NamingCase.KEBAB_CASE, "full-name"),
    ],
)
def test_convert_case(raw: str, case: NamingCase, expected: str) -> None:
    assert convert_case(raw, case) == expected


def test_convert_namespace_per_segment() -> None:
    assert convert_namespace("My.CoolApp", NamingCase.SNAKE_CASE) == "my.cool_app"
    assert convert_namespace("my.app", NamingCase.PASCAL_CASE) == "My.App"


def test_sanitizer_escapes_reserved_words_and_builtins() -> None:
    sanitizer = NameSanitizer({"class"}, {"str"})

    assert sanitizer.sanitize_name("class", NamingCase.SNAKE_CASE) == "class_"
    assert sanitizer.sanitize_name("str", NamingCase.SNAKE_CASE) == "str_"


def test_sanitizer_resolves_conflicts_with_numeric_suffix() -> None:
    sanitizer = NameSanitizer()

    first = sanitizer.sanitize_name("full_name", NamingCase.PASCAL_CASE)
    second = sanitizer.sanitize_name("FullName", NamingCase.PASCAL_CASE)
    third = sanitizer.sanitize_name("fullName", NamingCase.PASCAL_CASE)

    assert (first, second, third) == ("FullName", "FullName_1", "FullName_2")


def test_reserved_names_push_members_aside() -> None:
    sanitizer = NameSanitizer()
    sanitizer.add_used_name("User")
    assert sanitizer.is_used("User")

    assert sanitizer.sanitize_name("user", NamingCase.PASCAL_CASE) == "User_1"
