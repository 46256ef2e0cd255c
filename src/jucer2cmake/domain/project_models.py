from __future__ import annotations

"""
Project Descriptor Tree Models.

Read-only view over a parsed project descriptor. Each node carries a type
tag, an ordered set of named properties and an ordered list of children.
The typed accessors separate "absent" (the default is returned) from
"present with the wrong type" (PropertyTypeError is raised).
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple, Union

from jucer2cmake.domain.errors import PropertyTypeError

PropertyValue = Union[str, int, bool]

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


# -----------------------------------------------------------------------------
# TREE NODE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectNode:
    """
    Immutable node of the project descriptor tree.

    Attributes:
        type: Element tag (e.g. 'JUCERPROJECT', 'GROUP', 'FILE').
        properties: Named property values in document order.
        children: Child nodes in document order.
    """
    type: str
    properties: Dict[str, PropertyValue] = field(default_factory=dict)
    children: Tuple["ProjectNode", ...] = ()

    def __iter__(self) -> Iterator["ProjectNode"]:
        return iter(self.children)

    def has_type(self, type_name: str) -> bool:
        return self.type == type_name

    # --- Property access ---

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def get_string(self, key: str, default: str = "") -> str:
        """
        Read a property as text.

        Integers render in decimal and booleans as '1'/'0', matching how the
        descriptor stores flags.
        """
        if key not in self.properties:
            return default
        value = self.properties[key]
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """
        Read a property as an integer.

        Raises:
            PropertyTypeError: If the value is present but not an integer.
        """
        if key not in self.properties:
            return default
        value = self.properties[key]
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            raise PropertyTypeError(self.type, key, value, "an integer") from None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """
        Read a property as a boolean.

        Raises:
            PropertyTypeError: If the value is present but not boolean-like.
        """
        if key not in self.properties:
            return default
        value = self.properties[key]
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise PropertyTypeError(self.type, key, value, "a boolean")

    # --- Child navigation ---

    def child(self, index: int) -> Optional["ProjectNode"]:
        """Return the child at index, or None when out of range."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def child_with_type(self, type_name: str) -> Optional["ProjectNode"]:
        """Return the first child with the given type tag."""
        for c in self.children:
            if c.type == type_name:
                return c
        return None

    def child_with_property(self, key: str, value: str) -> Optional["ProjectNode"]:
        """Return the first child whose property text equals value."""
        for c in self.children:
            if c.has_property(key) and c.get_string(key) == value:
                return c
        return None


def children_of(node: Optional[ProjectNode], type_name: str) -> Tuple[ProjectNode, ...]:
    """
    Return the children of the first child of node with the given type.

    Missing containers behave as empty ones.
    """
    if node is None:
        return ()
    container = node.child_with_type(type_name)
    return container.children if container is not None else ()
