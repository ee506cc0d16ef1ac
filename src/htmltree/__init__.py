from .document import Document, create_element
from .elements import ClosingPolicy, Element, closing_policy
from .errors import (
    ChildNotAllowedError,
    HTMLBuildError,
    InvalidAttributeError,
    InvalidTagNameError,
    InvalidTextError,
    NodeOwnershipError,
)
from .node import Node, TextNode
from .serialize import to_html

__version__ = "0.1.0"

__all__ = [
    "ChildNotAllowedError",
    "ClosingPolicy",
    "Document",
    "Element",
    "HTMLBuildError",
    "InvalidAttributeError",
    "InvalidTagNameError",
    "InvalidTextError",
    "Node",
    "NodeOwnershipError",
    "TextNode",
    "closing_policy",
    "create_element",
    "to_html",
]
