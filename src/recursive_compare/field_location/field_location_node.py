"""Tree node used to index registered field locations by segment."""

from typing import Any, Optional

from anytree import Node

from .field_location import FieldLocation


class FieldLocationNode(Node):  # type: ignore
    """Node holding one path segment in a tree of registered field locations.

    Extends anytree.Node so that registered locations sharing a prefix share
    the nodes of that prefix. Intermediate nodes exist only to connect
    registered descendants and are not themselves registered.

    Attributes:
        name (str): The segment this node stands for.
        location (Optional[FieldLocation]): Full location of this node, None for the root.
        registered (bool): True if this exact location was registered.

    Example:
        >>> root = FieldLocationNode("")
        >>> father = FieldLocationNode("father", parent=root, location=FieldLocation(["father"]))
        >>> name = FieldLocationNode("name", parent=father, location=father.location.child("name"), registered=True)
        >>> name.location.path
        'father.name'
        >>> father.registered
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FieldLocationNode"] = None,
        location: Optional[FieldLocation] = None,
        registered: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.location = location
        self.registered = registered

    def find_child(self, name: str) -> Optional["FieldLocationNode"]:
        for child in self.children:
            if child.name == name:
                return child
        return None
