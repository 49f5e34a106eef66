import pytest
from pydantic import ValidationError

from datas import PageData, TranslationTree, collect_key_paths, compare_structures, resolve_key_path


def test_resolve_two_segment_path():
    assert resolve_key_path({"a": {"b": "X"}}, "a.b") == "X"


def test_resolve_top_level_key():
    assert resolve_key_path({"greeting": "Hello World"}, "greeting") == "Hello World"


@pytest.mark.parametrize("document, key", [
    ({"a": {"b": "X"}}, "a.c"),
    ({"a": {"b": "X"}}, "c.b"),
    ({"a": {"b": "X"}}, "a"),
    ({"a": {"b": "X"}}, "a.b.c"),
    ({"a": "X"}, "a.b"),
    ({"a": {"b": ""}}, "a.b"),
    ({"a": {"b": 3}}, "a.b"),
    ({"a": ["b"]}, "a.b"),
    ({"a": None}, "a"),
])
def test_resolve_misses(document, key):
    assert resolve_key_path(document, key) is None


def test_resolve_does_not_mutate_document():
    document = {"header": {"title": "Header"}}
    resolve_key_path(document, "header.title")
    resolve_key_path(document, "header.missing")
    assert document == {"header": {"title": "Header"}}


def test_collect_key_paths():
    tree = {"greeting": "Hello", "header": {"title": "T", "nav": {"home": "Home"}}}
    assert collect_key_paths(tree) == ["greeting", "header.title", "header.nav.home"]


def test_compare_structures():
    reference = {"greeting": "Hello", "header": {"title": "T", "button": "B"}}
    other = {"greeting": "Hallo", "header": {"title": "K"}, "footer": "F"}

    missing, extra = compare_structures(reference, other)

    assert missing == ["header.button"]
    assert extra == ["footer"]


def test_compare_identical_structures():
    assert compare_structures({"a": {"b": "X"}}, {"a": {"b": "Y"}}) == ([], [])


def test_translation_tree_accepts_nested_strings():
    tree = TranslationTree.model_validate({"greeting": "Hello", "header": {"title": "Header"}})
    assert tree.root["header"]["title"] == "Header"


@pytest.mark.parametrize("raw", [
    {"greeting": 42},
    {"header": {"title": ["a"]}},
    {"header.title": "dotted"},
    ["not", "an", "object"],
])
def test_translation_tree_rejects_malformed(raw):
    with pytest.raises(ValidationError):
        TranslationTree.model_validate(raw)


def test_page_data_defaults():
    page = PageData.model_validate({"elements": [{"id": "title", "key": "header.title"}]})
    assert page.lang == ""
    assert page.elements[0].content == ""
