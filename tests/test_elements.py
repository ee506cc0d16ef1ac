import pytest

from htmltree import ClosingPolicy, Element, closing_policy
from htmltree.elements import is_valid_name, tag_name


@pytest.mark.parametrize("element", list(Element))
def test_every_catalog_element_resolves_deterministically(element):
    first = closing_policy(element)
    assert isinstance(first, ClosingPolicy)
    assert closing_policy(element) is first
    assert closing_policy(element.value) is first


@pytest.mark.parametrize(
    ("tag", "policy"),
    [
        ("html", ClosingPolicy.PAIRED),
        ("p", ClosingPolicy.PAIRED),
        ("script", ClosingPolicy.PAIRED),
        ("br", ClosingPolicy.SELF_CLOSING),
        ("track", ClosingPolicy.SELF_CLOSING),
        ("source", ClosingPolicy.SELF_CLOSING),
        ("img", ClosingPolicy.VOID),
        ("input", ClosingPolicy.VOID),
        ("link", ClosingPolicy.VOID),
        ("meta", ClosingPolicy.VOID),
        ("hr", ClosingPolicy.VOID),
    ],
)
def test_known_policies(tag, policy):
    assert closing_policy(tag) is policy


def test_unknown_tags_default_to_paired():
    assert closing_policy("my-widget") is ClosingPolicy.PAIRED


def test_lookup_is_case_sensitive():
    assert closing_policy("BR") is ClosingPolicy.PAIRED
    assert closing_policy("Img") is ClosingPolicy.PAIRED


def test_only_paired_allows_children():
    assert ClosingPolicy.PAIRED.allows_children
    assert not ClosingPolicy.VOID.allows_children
    assert not ClosingPolicy.SELF_CLOSING.allows_children


def test_tag_name_uses_lowercase_value_for_elements():
    assert tag_name(Element.HTML) == "html"
    assert tag_name("Custom") == "Custom"
    assert str(Element.DIV) == "div"


@pytest.mark.parametrize("name", ["", "a b", "a>", "a/", 'a"', "a=", "a\x00", "\tp"])
def test_invalid_names(name):
    assert not is_valid_name(name)


@pytest.mark.parametrize("name", ["p", "data-id", "aria-label", "x:y", "my-widget"])
def test_valid_names(name):
    assert is_valid_name(name)
