"""A mutable JSON document tree with parent links and consistency checks."""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum
from typing import Union

Scalar = Union[None, bool, str, float]


class JsonTag(IntEnum):
    """The kind of value a JsonNode holds."""

    NULL = 0
    BOOL = 1
    STRING = 2
    NUMBER = 3
    ARRAY = 4
    OBJECT = 5


class JsonCheckError(ValueError):
    """A JsonNode tree is structurally inconsistent or holds invalid text."""


def _utf8_char_length(data: bytes, pos: int) -> int:
    """Return the length of the valid UTF-8 character at ``pos``, or 0 if invalid.

    Follows RFC 3629: no overlong forms, no surrogates, nothing above U+10FFFF.
    Bytes past the end of ``data`` read as NUL, so clipped sequences are invalid.
    """

    def at(index: int) -> int:
        return data[index] if index < len(data) else 0

    def continuation(index: int) -> bool:
        return at(index) & 0xC0 == 0x80

    c = at(pos)
    if c <= 0x7F:
        return 1
    if c <= 0xC1:
        return 0
    if c <= 0xDF:
        return 2 if continuation(pos + 1) else 0
    if c <= 0xEF:
        if c == 0xE0 and at(pos + 1) < 0xA0:
            return 0
        if c == 0xED and at(pos + 1) > 0x9F:
            return 0
        if continuation(pos + 1) and continuation(pos + 2):
            return 3
        return 0
    if c <= 0xF4:
        if c == 0xF0 and at(pos + 1) < 0x90:
            return 0
        if c == 0xF4 and at(pos + 1) > 0x8F:
            return 0
        if all(continuation(pos + offset) for offset in (1, 2, 3)):
            return 4
        return 0
    return 0


def utf8_validate(data: bytes | str) -> bool:
    """Return True when ``data`` is valid UTF-8 (text: encodable without surrogates)."""
    if isinstance(data, str):
        try:
            data = data.encode("utf-8")
        except UnicodeEncodeError:
            return False
    data = bytes(data)
    pos = 0
    while pos < len(data):
        length = _utf8_char_length(data, pos)
        if length == 0:
            return False
        pos += length
    return True


class JsonNode:
    """One JSON value; arrays and objects keep their children in order.

    ``key`` is set only while the node is a member of an object, and
    ``parent`` only while it belongs to an array or object.
    """

    def __init__(self, tag: JsonTag, value: Scalar = None) -> None:
        self.tag = tag
        self.value = value
        self.key: str | None = None
        self.parent: JsonNode | None = None
        self._children: list[JsonNode] = []

    @property
    def is_container(self) -> bool:
        return self.tag in (JsonTag.ARRAY, JsonTag.OBJECT)

    @property
    def children(self) -> tuple[JsonNode, ...]:
        return tuple(self._children)

    def __iter__(self) -> Iterator[JsonNode]:
        if not self.is_container:
            return iter(())
        return iter(tuple(self._children))

    def __len__(self) -> int:
        return len(self._children) if self.is_container else 0

    def __repr__(self) -> str:
        if self.is_container:
            return f"JsonNode({self.tag.name}, {len(self._children)} children)"
        return f"JsonNode({self.tag.name}, {self.value!r})"

    def _require(self, tag: JsonTag, child: JsonNode) -> None:
        if self.tag != tag:
            raise TypeError(f"node is {self.tag!r}, expected {tag!r}")
        if child.parent is not None:
            raise ValueError("node already belongs to a parent")

    def _attach(self, child: JsonNode, key: str | None, first: bool) -> None:
        child.parent = self
        child.key = key
        if first:
            self._children.insert(0, child)
        else:
            self._children.append(child)

    def append_element(self, element: JsonNode) -> None:
        """Add ``element`` at the end of this array."""
        self._require(JsonTag.ARRAY, element)
        self._attach(element, None, first=False)

    def prepend_element(self, element: JsonNode) -> None:
        """Add ``element`` at the start of this array."""
        self._require(JsonTag.ARRAY, element)
        self._attach(element, None, first=True)

    def append_member(self, key: str, value: JsonNode) -> None:
        """Add ``value`` under ``key`` at the end of this object."""
        self._require(JsonTag.OBJECT, value)
        self._attach(value, str(key), first=False)

    def prepend_member(self, key: str, value: JsonNode) -> None:
        """Add ``value`` under ``key`` at the start of this object."""
        self._require(JsonTag.OBJECT, value)
        self._attach(value, str(key), first=True)

    def remove_from_parent(self) -> None:
        """Detach this node from its array or object; do nothing if it has none."""
        parent = self.parent
        if parent is None:
            return
        parent._children = [child for child in parent._children if child is not self]
        self.parent = None
        self.key = None

    def find_element(self, index: int) -> JsonNode | None:
        """Return the array element at ``index``, or None if there is none."""
        if self.tag != JsonTag.ARRAY or not 0 <= index < len(self._children):
            return None
        return self._children[index]

    def find_member(self, key: str) -> JsonNode | None:
        """Return the first object member named ``key``, or None."""
        if self.tag != JsonTag.OBJECT:
            return None
        return next((child for child in self._children if child.key == key), None)

    def check(self) -> None:
        """Raise JsonCheckError if this tree is inconsistent or holds invalid text."""
        self._check(set())

    def _check(self, ancestors: set[int]) -> None:
        if self.key is not None and not utf8_validate(self.key):
            raise JsonCheckError("key contains invalid UTF-8")
        if not isinstance(self.tag, JsonTag):
            raise JsonCheckError(f"tag is invalid ({self.tag})")

        if self.tag == JsonTag.BOOL:
            if not isinstance(self.value, bool):
                raise JsonCheckError("bool_ is neither false (0) nor true (1)")
        elif self.tag == JsonTag.STRING:
            if self.value is None:
                raise JsonCheckError("string_ is NULL")
            if not isinstance(self.value, str) or not utf8_validate(self.value):
                raise JsonCheckError("string_ contains invalid UTF-8")
        elif self.is_container:
            inside = ancestors | {id(self)}
            seen: set[int] = set()
            for child in self._children:
                if child is self:
                    raise JsonCheckError("node is its own child")
                if id(child) in inside:
                    raise JsonCheckError("node contains one of its ancestors (cycle)")
                if id(child) in seen:
                    raise JsonCheckError("child appears more than once (cycle)")
                seen.add(id(child))
                if child.parent is not self:
                    raise JsonCheckError("child does not point back to parent")
                if self.tag == JsonTag.ARRAY and child.key is not None:
                    raise JsonCheckError("Array element's key is not NULL")
                if self.tag == JsonTag.OBJECT and child.key is None:
                    raise JsonCheckError("Object member's key is NULL")
                child._check(inside)


def mknull() -> JsonNode:
    """Return a new null node."""
    return JsonNode(JsonTag.NULL)


def mkbool(value: bool) -> JsonNode:
    """Return a new boolean node."""
    return JsonNode(JsonTag.BOOL, bool(value))


def mkstring(value: str) -> JsonNode:
    """Return a new string node."""
    if not isinstance(value, str):
        raise TypeError("string value must be str")
    return JsonNode(JsonTag.STRING, value)


def mknumber(value: float) -> JsonNode:
    """Return a new number node; numbers are stored as floats."""
    return JsonNode(JsonTag.NUMBER, float(value))


def mkarray() -> JsonNode:
    """Return a new empty array node."""
    return JsonNode(JsonTag.ARRAY)


def mkobject() -> JsonNode:
    """Return a new empty object node."""
    return JsonNode(JsonTag.OBJECT)