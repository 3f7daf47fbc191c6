# tests/test_casing.py
"""
Unit tests for the case helpers.

- Covers word splitting for camel, Pascal, kebab and snake case input.
- Checks that canonical forms are stable when applied twice.
"""

import pytest

from conventions.casing import camel_case, kebab_case, same_identifier, split_camel, split_kebab, words

IDENTIFIERS = [
    "testName",
    "test-name",
    "ThisIsABadlyNamedFunction",
    "this-is-a-well-named-example",
    "bad_table_name",
    "Bad Table Name",
    "HTTPServer",
    "node14",
    "a-b-c",
    "getAB",
    "café-app",
    "",
]


def test_words_split_on_case_and_separators():
    assert words("testName") == ["test", "name"]
    assert words("test-name_table.v2") == ["test", "name", "table", "v2"]
    # Every capital starts a word, so acronyms split into letters
    assert words("HTTPServer") == ["h", "t", "t", "p", "server"]
    assert words("getAB") == ["get", "a", "b"]
    assert words("v2api") == ["v2", "api"]
    assert words("thisIsAWellNamedFunction") == ["this", "is", "a", "well", "named", "function"]
    assert words("") == []


def test_kebab_case():
    assert kebab_case("testName") == "test-name"
    assert kebab_case("ThisIsABadlyNamedFunction") == "this-is-a-badly-named-function"
    assert kebab_case("test-name-bad_table_name") == "test-name-bad-table-name"
    assert kebab_case("This-is-a-badly-named-example") == "this-is-a-badly-named-example"
    assert kebab_case("test-name") == "test-name"
    assert kebab_case("") == ""


def test_camel_case():
    assert camel_case("this-is-a-well-named-example") == "thisIsAWellNamedExample"
    assert camel_case("ThisIsABadlyNamedFunction") == "thisIsABadlyNamedFunction"
    assert camel_case("thisIsAWellNamedFunction") == "thisIsAWellNamedFunction"
    assert camel_case("bad_table_name") == "badTableName"
    assert camel_case("") == ""


@pytest.mark.parametrize("text", IDENTIFIERS)
def test_canonical_forms_are_idempotent(text):
    assert kebab_case(kebab_case(text)) == kebab_case(text)
    assert camel_case(camel_case(text)) == camel_case(text)


def test_tokenizers():
    assert split_camel("thisIsIt") == ["this", "is", "it"]
    assert split_camel("ThisIsIt") == ["this", "is", "it"]
    assert split_kebab("this-is-it") == ["this", "is", "it"]
    assert split_kebab("") == []
    assert split_camel("") == []


def test_same_identifier_across_conventions():
    assert same_identifier("thisIsAWellNamedExample", "this-is-a-well-named-example")
    assert same_identifier("doThing", "doThing")
    assert not same_identifier("thisIsABadlyNamedFunction", "this-is-a-badly-named-example")


def test_single_letter_words_round_trip():
    assert camel_case("a-b-c") == "aBC"
    assert camel_case("aBC") == "aBC"
    assert kebab_case("getAB") == "get-a-b"
    assert camel_case("get-a-b") == "getAB"


def test_non_ascii_letters_are_word_characters():
    assert words("café-app") == ["café", "app"]
    assert kebab_case("café-app") == "café-app"
    assert kebab_case("CaféApp") == "café-app"
