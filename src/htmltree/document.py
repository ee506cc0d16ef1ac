"""Document factory: the supported way to create nodes."""

from __future__ import annotations

from .elements import Element, is_valid_name, tag_name
from .errors import InvalidTagNameError
from .node import Node

DOCTYPE = "<!DOCTYPE html>"


def create_element(tag: Element | str) -> Node:
    """
    Create an empty element.

    Args:
        tag: An ``Element`` member or a tag name string. Names are used as
            given; unknown names become paired elements.

    Returns:
        A new node with no attributes or children

    Raises:
        InvalidTagNameError: If the name is empty or contains whitespace,
            quotes, ``<``, ``>``, ``/``, ``=`` or control characters
    """
    name = tag_name(tag)
    if not is_valid_name(name):
        raise InvalidTagNameError("invalid-tag-name", detail=name)
    return Node(name)


class Document:
    """An HTML page skeleton: ``<html>`` holding ``<head>`` and ``<body>``.

    ``head`` and ``body`` are the live nodes inside ``root``, so content is
    added with e.g. ``doc.body.append_child(...)``.
    """

    __slots__ = ("body", "head", "root")

    root: Node
    head: Node
    body: Node

    def __init__(self, *, lang: str | None = None, title: str | None = None, charset: str | None = "utf-8") -> None:
        self.root = create_element(Element.HTML)
        if lang is not None:
            self.root.set_attribute("lang", lang)

        self.head = create_element(Element.HEAD)
        if charset is not None:
            meta = create_element(Element.META)
            meta.set_attribute("charset", charset)
            self.head.append_child(meta)
        if title is not None:
            title_node = create_element(Element.TITLE)
            title_node.inner_text(title)
            self.head.append_child(title_node)

        self.body = create_element(Element.BODY)
        self.root.append_child_list([self.head, self.body])

    create_element = staticmethod(create_element)

    def render(self, *, pretty: bool = False, indent_size: int = 4, doctype: bool = True) -> str:
        """Serialize the document, optionally preceded by ``<!DOCTYPE html>``."""
        html = self.root.render(pretty=pretty, indent_size=indent_size)
        if not doctype:
            return html
        separator = "\n" if pretty else ""
        return f"{DOCTYPE}{separator}{html}"
