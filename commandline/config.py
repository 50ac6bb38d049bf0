"""
Minimal hierarchical configuration tree receiving parsed option values.

The parser only relies on a small protocol, so any object offering the same
operations can be used instead of Node:
- set(key, value): set a scalar at a dotted key, creating nodes on the way.
- get(key): get-or-create the node at a dotted key.
- add(name, value): append a named child holding a scalar.
- remove_children(): drop every child of a node.
- node[key].value_as_default(default): read with a type-aware default. A
  missing key yields a detached empty node, so reading never creates nodes.

Keys are dot-separated paths ("Server.Port"). Children keep insertion order
and names may repeat (add() always appends); lookups take the first match.
"""
from .formatting import parse_bool
from .utils import *


class Node:
    """
    One node of the tree: a name, an optional scalar value, ordered children.
    """

    __slots__ = ("_name", "_value", "_children")

    def __init__(self, name, value=Unset, /):
        if not isinstance(name, str):
            raise TypeError("node name must be a string")
        self._name = name
        self._value = value
        self._children = []

    name = mirror("name")
    children = mirror("children")

    @property
    def value(self):
        """
        The scalar held by this node, or None when it was never set.
        """
        return coalesce(self._value)

    def _child(self, name):
        for child in self._children:
            if child._name == name:
                return child
        return None

    def _lookup(self, key):
        node = self
        for part in _split_key(key):
            if (node := node._child(part)) is None:
                return None
        return node

    def get(self, key, /):
        node = self
        for part in _split_key(key):
            child = node._child(part)
            if child is None:
                child = Node(part)
                node._children.append(child)
            node = child
        return node

    def set(self, key, value, /):
        self.get(key)._value = value

    def add(self, name, value=Unset, /):
        child = Node(name, value)
        self._children.append(child)
        return child

    def remove_children(self):
        self._children.clear()

    def value_as_default(self, default, /):
        """
        Read the value converted to the type of `default`; `default` when unset.

        conversions
        - bool: the tree's boolean spellings (true/on/yes/1, false/off/no/0)
        - int, float: numeric parse
        - str: as stored
        A stored value that cannot be converted also yields `default`.
        """
        if self._value is Unset:
            return default
        value = self._value
        try:
            match default:
                case bool():
                    return parse_bool(value) if isinstance(value, str) else bool(value)
                case int():
                    return int(value)
                case float():
                    return float(value)
                case str():
                    return str(value)
        except ValueError:
            return default
        return value

    def __getitem__(self, key, /):
        node = self._lookup(key)
        return node if node is not None else Node(key.rsplit(".", 1)[-1])

    def __contains__(self, key, /):
        return self._lookup(key) is not None

    def __iter__(self):
        return iter(tuple(self._children))

    def __len__(self):
        return len(self._children)

    def __repr__(self):
        return "node(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        yield "name", self._name
        if self._value is not Unset:
            yield "value", self._value
        if self._children:
            yield "children", self._children

    def to_dict(self):
        """
        Plain nested view: {"value": ..., "children": {"<child>": {...}}}, handy
        for assertions and pretty printing. Either key is omitted when empty, so
        a child named "value" never shadows the node's own scalar. Repeated
        child names keep the last one.
        """
        view = {}
        if self._value is not Unset:
            view["value"] = self._value
        if self._children:
            view["children"] = {child._name: child.to_dict() for child in self._children}
        return view


def _split_key(key):
    if not isinstance(key, str):
        raise TypeError("node key must be a string")
    parts = key.split(".")
    if not all(parts):
        raise ValueError("node key %r has an empty segment" % key)
    return parts


__all__ = (
    "Node",
)
