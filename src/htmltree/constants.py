"""Static tag tables used for closing-policy resolution and serialization."""

from __future__ import annotations

# Elements written as ``<tag/>``.
SELF_CLOSING_ELEMENTS: frozenset[str] = frozenset({"br", "source", "track"})

# Elements written as ``<tag>`` with no end tag.
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "wbr",
    }
)

# Text inside these elements is emitted without entity escaping.
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({"script", "style"})

# Whitespace inside these elements is significant, so pretty output keeps it.
PRESERVE_WHITESPACE_ELEMENTS: frozenset[str] = frozenset({"pre", "textarea"})

# Characters that may never appear in a tag or attribute name.
FORBIDDEN_NAME_CHARACTERS: frozenset[str] = frozenset({" ", "\t", "\n", "\f", "\r", '"', "'", "<", ">", "/", "="})

# Control characters allowed inside attribute values.
ALLOWED_CONTROL_CHARACTERS: frozenset[str] = frozenset({"\t", "\n", "\r"})
