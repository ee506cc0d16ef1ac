"""Error types and messages for building element trees.

Every mutation that would produce markup the serializer cannot represent
raises one of the exceptions below at the offending call. Rendering itself
never raises.
"""

from __future__ import annotations


def generate_error_message(code: str, tag_name: str | None = None, detail: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        tag_name: Optional tag name to include in the message for context
        detail: Optional offending name or value

    Returns:
        Human-readable error message string
    """
    messages = {
        # Tag errors
        "invalid-tag-name": f"Invalid tag name {detail!r}",
        # Attribute errors
        "invalid-attribute-name": f"Invalid attribute name {detail!r} on <{tag_name}>",
        "invalid-attribute-value": f"Control character in value of attribute {detail!r} on <{tag_name}>",
        # Child errors
        "child-not-allowed-in-void-element": f"<{tag_name}> is a void element and cannot have children",
        "child-not-allowed-in-self-closing-element": f"<{tag_name}/> is self-closing and cannot have children",
        # Text errors
        "raw-text-contains-end-tag": f"Text inside <{tag_name}> cannot contain '</{tag_name}'",
        # Ownership errors
        "node-already-attached": f"<{detail}> already has a parent; use clone_node() to reuse it under <{tag_name}>",
        "node-is-ancestor": f"Cannot append <{detail}> to <{tag_name}>: it would become its own ancestor",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class HTMLBuildError(ValueError):
    """Base class for errors raised while building a tree."""

    code: str
    tag_name: str | None

    def __init__(self, code: str, tag_name: str | None = None, detail: str | None = None) -> None:
        self.code = code
        self.tag_name = tag_name
        super().__init__(generate_error_message(code, tag_name, detail))

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidTagNameError(HTMLBuildError):
    """Raised when a tag name cannot be written as markup."""


class InvalidAttributeError(HTMLBuildError):
    """Raised when an attribute name or value cannot be written as markup."""


class ChildNotAllowedError(HTMLBuildError):
    """Raised when appending a child to a void or self-closing element."""


class NodeOwnershipError(HTMLBuildError):
    """Raised when an append would share a node between parents or create a cycle."""


class InvalidTextError(HTMLBuildError):
    """Raised when text would end a script or style element early."""
