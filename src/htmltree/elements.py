"""Element catalog and closing-policy resolution."""

from __future__ import annotations

import enum

from .constants import FORBIDDEN_NAME_CHARACTERS, SELF_CLOSING_ELEMENTS, VOID_ELEMENTS


class ClosingPolicy(enum.Enum):
    """How an element's start and end markup is written."""

    PAIRED = "paired"  # <tag>children</tag>
    SELF_CLOSING = "self-closing"  # <tag/>
    VOID = "void"  # <tag>

    @property
    def allows_children(self) -> bool:
        return self is ClosingPolicy.PAIRED


class Element(str, enum.Enum):
    """Known HTML elements.

    Any API that takes a tag also accepts a plain string, so custom elements
    such as ``my-widget`` work without being listed here.
    """

    # Document structure
    HTML = "html"
    HEAD = "head"
    LINK = "link"
    META = "meta"
    STYLE = "style"
    TITLE = "title"
    BASE = "base"
    BODY = "body"
    HEADER = "header"
    MAIN = "main"
    FOOTER = "footer"
    # Sectioning
    ARTICLE = "article"
    ASIDE = "aside"
    NAV = "nav"
    SECTION = "section"
    DIV = "div"
    UL = "ul"
    OL = "ol"
    LI = "li"
    SPAN = "span"
    BR = "br"
    HR = "hr"
    WBR = "wbr"
    # Text
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    P = "p"
    A = "a"
    # Media
    IMG = "img"
    AUDIO = "audio"
    VIDEO = "video"
    TRACK = "track"
    SOURCE = "source"
    SVG = "svg"
    CANVAS = "canvas"
    AREA = "area"
    EMBED = "embed"
    # Tables
    COL = "col"
    # Scripting
    SCRIPT = "script"
    TEMPLATE = "template"
    # Forms and interactive
    BUTTON = "button"
    INPUT = "input"
    DATALIST = "datalist"
    SELECT = "select"
    OPTION = "option"
    FORM = "form"
    LABEL = "label"
    TEXTAREA = "textarea"
    DETAILS = "details"
    DIALOG = "dialog"
    SUMMARY = "summary"

    def __str__(self) -> str:
        return self.value


def tag_name(tag: Element | str) -> str:
    """Return the textual name of a tag identity."""
    if isinstance(tag, Element):
        return tag.value
    return str(tag)


def is_valid_name(name: str) -> bool:
    """Return True if ``name`` can be written as a tag or attribute name."""
    if not name:
        return False
    for ch in name:
        if ch in FORBIDDEN_NAME_CHARACTERS:
            return False
        if ord(ch) < 0x20 or ord(ch) == 0x7F:
            return False
    return True


def closing_policy(tag: Element | str) -> ClosingPolicy:
    """Resolve the closing policy for a tag.

    Matching is case-sensitive; unknown tags are paired.
    """
    name = tag_name(tag)
    if name in VOID_ELEMENTS:
        return ClosingPolicy.VOID
    if name in SELF_CLOSING_ELEMENTS:
        return ClosingPolicy.SELF_CLOSING
    return ClosingPolicy.PAIRED
