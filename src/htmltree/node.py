from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .constants import ALLOWED_CONTROL_CHARACTERS, RAW_TEXT_ELEMENTS
from .elements import ClosingPolicy, closing_policy, is_valid_name
from .errors import ChildNotAllowedError, InvalidAttributeError, InvalidTextError, NodeOwnershipError
from .serialize import to_html

if TYPE_CHECKING:
    from collections.abc import Iterable


def _has_control_character(value: str) -> bool:
    for ch in value:
        code = ord(ch)
        if (code < 0x20 or code == 0x7F) and ch not in ALLOWED_CONTROL_CHARACTERS:
            return True
    return False


def _attribute_value(value: str | None) -> str:
    if value is None:
        return ""
    return str(value)


class TextNode:
    __slots__ = ("data", "name")

    data: str
    name: str

    def __init__(self, data: str) -> None:
        self.data = data
        self.name = "#text"

    def to_text(self) -> str:
        return self.data

    def has_child_nodes(self) -> bool:
        """Return False for TextNode."""
        return False

    def clone_node(self) -> TextNode:
        return TextNode(self.data)

    def render(self, *, pretty: bool = False, indent_size: int = 4) -> str:
        return to_html(self, pretty=pretty, indent_size=indent_size)


Child = Union[TextNode, "Node"]


class Node:
    """An element in the tree.

    Build nodes with ``create_element()``, which resolves the closing policy
    from the tag. The tag name and policy never change afterwards.

    Attributes are an ordered list of ``(name, value)`` pairs. Setting the same
    name twice keeps both pairs, and both are rendered in insertion order.
    """

    __slots__ = ("attrs", "children", "closing", "name", "parent")

    name: str
    closing: ClosingPolicy
    attrs: list[tuple[str, str]]
    children: list[Child]
    parent: Node | None

    def __init__(self, name: str) -> None:
        self.name = name
        self.closing = closing_policy(name)
        self.attrs = []
        self.children = []
        self.parent = None

    # Attributes

    def _check_attribute(self, name: str, value: str) -> None:
        if not isinstance(name, str) or not is_valid_name(name):
            raise InvalidAttributeError("invalid-attribute-name", self.name, str(name))
        if _has_control_character(value):
            raise InvalidAttributeError("invalid-attribute-value", self.name, name)

    def set_attribute(self, name: str, value: str | None) -> None:
        """
        Append an attribute.

        Args:
            name: Attribute name, e.g. ``"lang"``
            value: Attribute value. An empty string or None renders as a bare name
                (``defer``); other values are quoted and escaped on render.

        Raises:
            InvalidAttributeError: If the name contains whitespace, quotes,
                ``<``, ``>``, ``/``, ``=`` or control characters, or the value
                contains control characters other than tab and newlines.
        """
        value = _attribute_value(value)
        self._check_attribute(name, value)
        self.attrs.append((name, value))

    def set_attribute_list(self, attributes: Iterable[tuple[str, str | None]]) -> None:
        """
        Append several attributes in order.

        All pairs are checked first; if any is invalid, none is added.
        """
        pairs = [(name, _attribute_value(value)) for name, value in attributes]
        for name, value in pairs:
            self._check_attribute(name, value)
        self.attrs.extend(pairs)

    def get_attribute(self, name: str) -> str | None:
        """Return the value most recently set for ``name``, or None."""
        for attr_name, value in reversed(self.attrs):
            if attr_name == name:
                return value
        return None

    # Children

    def _check_can_have_children(self) -> None:
        if self.closing.allows_children:
            return
        if self.closing is ClosingPolicy.VOID:
            raise ChildNotAllowedError("child-not-allowed-in-void-element", self.name)
        raise ChildNotAllowedError("child-not-allowed-in-self-closing-element", self.name)

    def _check_child(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise TypeError(f"append_child() expects a Node, got {type(node).__name__}")
        if node.parent is not None:
            raise NodeOwnershipError("node-already-attached", self.name, node.name)
        if node is self:
            raise NodeOwnershipError("node-is-ancestor", self.name, node.name)
        # A childless node cannot be an ancestor of anything
        if not node.children:
            return
        ancestor: Node | None = self.parent
        while ancestor is not None:
            if ancestor is node:
                raise NodeOwnershipError("node-is-ancestor", self.name, node.name)
            ancestor = ancestor.parent

    def inner_text(self, value: str) -> None:
        """
        Append a text child.

        Each call adds another text child after the existing children; it
        never replaces earlier content.

        Raises:
            ChildNotAllowedError: If this is a void or self-closing element
            InvalidTextError: If this is a ``script`` or ``style`` element and
                the text contains its end tag
        """
        self._check_can_have_children()
        value = str(value)
        if self.name in RAW_TEXT_ELEMENTS and f"</{self.name}" in value.lower():
            raise InvalidTextError("raw-text-contains-end-tag", self.name)
        self.children.append(TextNode(value))

    def append_child(self, node: Node) -> None:
        """
        Append a node to the end of this node's children.

        A node belongs to at most one parent. To place the same subtree in
        two parents, append a ``clone_node()`` of it.

        Raises:
            ChildNotAllowedError: If this is a void or self-closing element
            NodeOwnershipError: If ``node`` already has a parent, or is this
                node or one of its ancestors
        """
        self._check_can_have_children()
        self._check_child(node)
        self.children.append(node)
        node.parent = self

    def append_child_list(self, nodes: Iterable[Node]) -> None:
        """Append several nodes in order. All are checked before any is added."""
        nodes = list(nodes)
        self._check_can_have_children()
        seen: set[int] = set()
        for node in nodes:
            self._check_child(node)
            if id(node) in seen:
                raise NodeOwnershipError("node-already-attached", self.name, node.name)
            seen.add(id(node))
        for node in nodes:
            self.children.append(node)
            node.parent = self

    def has_child_nodes(self) -> bool:
        """Return True if this node has children."""
        return bool(self.children)

    # Copying

    def _shallow_copy(self) -> Node:
        copy = Node(self.name)
        copy.attrs = list(self.attrs)
        return copy

    def clone_node(self) -> Node:
        """
        Return a deep copy of this node.

        Attributes, text and descendant elements are all copied, so changing
        the copy never affects the original. The copy has no parent.

        Note that cloning duplicates attributes such as ``id`` as-is.
        """
        clone = self._shallow_copy()
        stack: list[tuple[Node, Node]] = [(self, clone)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                if isinstance(child, TextNode):
                    target.children.append(child.clone_node())
                    continue
                copy = child._shallow_copy()
                copy.parent = target
                target.children.append(copy)
                stack.append((child, copy))
        return clone

    # Output

    def to_text(self) -> str:
        """Return the concatenated text of this node's descendants, unescaped."""
        parts: list[str] = []
        stack: list[Child] = [self]
        while stack:
            current = stack.pop()
            if isinstance(current, TextNode):
                parts.append(current.data)
            else:
                stack.extend(reversed(current.children))
        return "".join(parts)

    def render(self, *, pretty: bool = False, indent_size: int = 4) -> str:
        """
        Serialize this node and its subtree to HTML.

        Args:
            pretty: Put element children on their own indented lines
            indent_size: Spaces per nesting level when ``pretty`` is set

        Returns:
            The markup string. Rendering does not modify the tree.
        """
        return to_html(self, pretty=pretty, indent_size=indent_size)
