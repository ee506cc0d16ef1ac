"""HTML serialization for htmltree nodes."""

from __future__ import annotations

from typing import Any

from .constants import PRESERVE_WHITESPACE_ELEMENTS, RAW_TEXT_ELEMENTS
from .elements import ClosingPolicy

# Work item kinds for the serializer stack.
_ELEMENT = 0
_TEXT = 1
_LITERAL = 2


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr_value(value: str | None) -> str:
    if value is None:
        return ""
    value = str(value)
    value = value.replace("&", "&amp;").replace('"', "&quot;")
    return value.replace("<", "&lt;").replace(">", "&gt;")


def serialize_start_tag(name: str, attrs: list[tuple[str, str]] | None, closing: ClosingPolicy = ClosingPolicy.PAIRED) -> str:
    parts: list[str] = ["<", name]
    for key, value in attrs or ():
        if value == "":
            parts.extend([" ", key])
        else:
            parts.extend([" ", key, '="', _escape_attr_value(value), '"'])
    parts.append("/>" if closing is ClosingPolicy.SELF_CLOSING else ">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_html(node: Any, *, pretty: bool = False, indent_size: int = 4) -> str:
    """Convert node to HTML string.

    Compact output inserts no whitespace at all. With ``pretty`` each element
    child goes on its own line, indented ``indent_size`` spaces per level;
    elements whose children are all text stay on one line, and ``pre`` and
    ``textarea`` subtrees are written exactly as built.
    """
    if node.name == "#text":
        return _escape_text(node.data)

    parts: list[str] = []
    # (kind, payload, depth, lead, flag); flag means verbatim for text and
    # preformatted for elements
    stack: list[tuple[int, Any, int, str, bool]] = [(_ELEMENT, node, 0, "", False)]
    while stack:
        kind, item, depth, lead, flag = stack.pop()

        if kind == _LITERAL:
            parts.append(lead + item)
            continue

        if kind == _TEXT:
            parts.append(lead + (item if flag else _escape_text(item)))
            continue

        name: str = item.name
        open_tag = serialize_start_tag(name, item.attrs, item.closing)

        # Void and self-closing elements never render children
        if item.closing is not ClosingPolicy.PAIRED:
            parts.append(lead + open_tag)
            continue

        children: list[Any] = item.children
        end_tag = serialize_end_tag(name)
        if not children:
            parts.append(lead + open_tag + end_tag)
            continue

        child_raw = name in RAW_TEXT_ELEMENTS
        preformatted = flag or name in PRESERVE_WHITESPACE_ELEMENTS
        all_text = all(c.name == "#text" for c in children)

        if not pretty or preformatted or all_text:
            parts.append(lead + open_tag)
            stack.append((_LITERAL, end_tag, depth, "", False))
            for child in reversed(children):
                if child.name == "#text":
                    stack.append((_TEXT, child.data, depth + 1, "", child_raw))
                else:
                    stack.append((_ELEMENT, child, depth + 1, "", preformatted))
            continue

        # Block layout: one line per child, end tag on its own line
        child_lead = "\n" + " " * ((depth + 1) * indent_size)
        parts.append(lead + open_tag)
        stack.append((_LITERAL, end_tag, depth, "\n" + " " * (depth * indent_size), False))
        for child in reversed(children):
            if child.name == "#text":
                text = child.data if child_raw else child.data.strip()
                if text:
                    stack.append((_TEXT, text, depth + 1, child_lead, child_raw))
            else:
                stack.append((_ELEMENT, child, depth + 1, child_lead, False))

    return "".join(parts)
