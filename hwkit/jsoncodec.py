"""Strict JSON decoding into JsonNode trees and encoding back to text."""

from __future__ import annotations

import re
from collections.abc import Iterator

from hwkit.jsonnode import (
    JsonNode,
    JsonTag,
    mkarray,
    mkbool,
    mknull,
    mknumber,
    mkobject,
    mkstring,
    utf8_validate,
)

_WHITESPACE = b" \t\n\r"

# '-'? (0 | [1-9][0-9]*) ('.' [0-9]+)? ([Ee] [+-]? [0-9]+)?
_NUMBER_RE = re.compile(rb"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
_HEX16_RE = re.compile(rb"[0-9A-Fa-f]{4}")
# A run of string bytes that needs no special handling.
_PLAIN_RE = re.compile(rb'[^"\\\x00-\x1f]+')

_DECODE_ESCAPES = {
    ord('"'): '"',
    ord("\\"): "\\",
    ord("/"): "/",
    ord("b"): "\b",
    ord("f"): "\f",
    ord("n"): "\n",
    ord("r"): "\r",
    ord("t"): "\t",
}

_ENCODE_ESCAPES: dict[int, str] = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}
# Control characters below 0x1F are written as \u escapes; 0x1F itself is not.
for _code in range(0x1F):
    _ENCODE_ESCAPES.setdefault(_code, f"\\u{_code:04X}")
del _code


class JsonDecodeError(ValueError):
    """The text is not valid JSON."""


class _Parser:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def peek(self) -> int:
        return self.data[self.pos] if self.pos < len(self.data) else 0

    def fail(self, message: str) -> JsonDecodeError:
        return JsonDecodeError(f"{message} at offset {self.pos}")

    def skip_space(self) -> None:
        while self.pos < len(self.data) and self.data[self.pos] in _WHITESPACE:
            self.pos += 1

    def document(self) -> JsonNode:
        self.skip_space()
        node = self.value()
        self.skip_space()
        if self.pos != len(self.data):
            raise self.fail("unexpected trailing data")
        return node

    def literal(self, word: bytes) -> None:
        if not self.data.startswith(word, self.pos):
            raise self.fail(f"expected {word.decode()!r}")
        self.pos += len(word)

    def value(self) -> JsonNode:
        c = self.peek()
        if c == ord("n"):
            self.literal(b"null")
            return mknull()
        if c == ord("f"):
            self.literal(b"false")
            return mkbool(False)
        if c == ord("t"):
            self.literal(b"true")
            return mkbool(True)
        if c == ord('"'):
            return mkstring(self.string())
        if c == ord("["):
            return self.array()
        if c == ord("{"):
            return self.object()
        return self.number()

    def array(self) -> JsonNode:
        node = mkarray()
        self.pos += 1
        self.skip_space()
        if self.peek() == ord("]"):
            self.pos += 1
            return node
        while True:
            node.append_element(self.value())
            self.skip_space()
            c = self.peek()
            self.pos += 1
            if c == ord("]"):
                return node
            if c != ord(","):
                raise self.fail("expected ',' or ']'")
            self.skip_space()

    def object(self) -> JsonNode:
        node = mkobject()
        self.pos += 1
        self.skip_space()
        if self.peek() == ord("}"):
            self.pos += 1
            return node
        while True:
            key = self.string()
            self.skip_space()
            if self.peek() != ord(":"):
                raise self.fail("expected ':'")
            self.pos += 1
            self.skip_space()
            node.append_member(key, self.value())
            self.skip_space()
            c = self.peek()
            self.pos += 1
            if c == ord("}"):
                return node
            if c != ord(","):
                raise self.fail("expected ',' or '}'")
            self.skip_space()

    def hex16(self) -> int:
        match = _HEX16_RE.match(self.data, self.pos)
        if match is None:
            raise self.fail("expected four hex digits")
        self.pos = match.end()
        return int(match.group(), 16)

    def unicode_escape(self) -> str:
        uc = self.hex16()
        if 0xD800 <= uc <= 0xDFFF:
            if not self.data.startswith(b"\\u", self.pos):
                raise self.fail("incomplete surrogate pair")
            self.pos += 2
            lc = self.hex16()
            if not (uc <= 0xDBFF and 0xDC00 <= lc <= 0xDFFF):
                raise self.fail("invalid surrogate pair")
            return chr(0x10000 + (((uc & 0x3FF) << 10) | (lc & 0x3FF)))
        if uc == 0:
            raise self.fail("\\u0000 is not allowed")
        return chr(uc)

    def string(self) -> str:
        if self.peek() != ord('"'):
            raise self.fail("expected string")
        self.pos += 1
        parts: list[str] = []
        while True:
            c = self.peek()
            if c == ord('"'):
                self.pos += 1
                return "".join(parts)
            if c == ord("\\"):
                self.pos += 1
                escape = self.peek()
                self.pos += 1
                if escape == ord("u"):
                    parts.append(self.unicode_escape())
                elif escape in _DECODE_ESCAPES:
                    parts.append(_DECODE_ESCAPES[escape])
                else:
                    raise self.fail("invalid escape")
            elif c <= 0x1F:
                raise self.fail("control character or end of input in string")
            else:
                match = _PLAIN_RE.match(self.data, self.pos)
                assert match is not None
                run = match.group()
                if not utf8_validate(run):
                    raise self.fail("invalid UTF-8 in string")
                parts.append(run.decode("utf-8"))
                self.pos = match.end()

    def number(self) -> JsonNode:
        match = _NUMBER_RE.match(self.data, self.pos)
        if match is None:
            raise self.fail("invalid value")
        self.pos = match.end()
        return mknumber(float(match.group().decode("ascii")))


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, str):
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise JsonDecodeError("text contains invalid characters") from exc
    else:
        data = bytes(text)
    # The input ends at the first NUL byte.
    return data.split(b"\0", 1)[0]


def decode(text: str | bytes) -> JsonNode:
    """Parse ``text`` strictly into a JsonNode tree; raise JsonDecodeError if invalid."""
    parser = _Parser(_as_bytes(text))
    try:
        return parser.document()
    except RecursionError as exc:
        raise JsonDecodeError("nesting too deep") from exc


def validate(text: str | bytes) -> bool:
    """Return True when ``text`` is valid JSON."""
    try:
        decode(text)
    except JsonDecodeError:
        return False
    return True


def encode_string(value: str) -> str:
    """Return ``value`` as a quoted JSON string literal."""
    if not isinstance(value, str):
        raise TypeError("value must be str")
    if not utf8_validate(value):
        raise ValueError("string contains invalid UTF-8")
    return '"' + value.translate(_ENCODE_ESCAPES) + '"'


def _encode_number(value: float) -> str:
    text = "%.16g" % float(value)
    if _NUMBER_RE.fullmatch(text.encode("ascii")):
        return text
    return "null"


def _emit(node: JsonNode, space: str | None, level: int) -> Iterator[str]:
    tag = node.tag
    if tag == JsonTag.NULL:
        yield "null"
    elif tag == JsonTag.BOOL:
        yield "true" if node.value else "false"
    elif tag == JsonTag.STRING:
        yield encode_string(node.value)  # type: ignore[arg-type]
    elif tag == JsonTag.NUMBER:
        yield _encode_number(node.value)  # type: ignore[arg-type]
    elif tag in (JsonTag.ARRAY, JsonTag.OBJECT):
        is_object = tag == JsonTag.OBJECT
        opening, closing = ("{", "}") if is_object else ("[", "]")
        children = node.children
        if space is None:
            yield opening
            for index, child in enumerate(children):
                if index:
                    yield ","
                if is_object:
                    yield encode_string(child.key)  # type: ignore[arg-type]
                    yield ":"
                yield from _emit(child, None, level)
            yield closing
            return
        if not children:
            yield opening + closing
            return
        yield opening + "\n"
        inner = space * (level + 1)
        for index, child in enumerate(children):
            if index:
                yield ",\n"
            yield inner
            if is_object:
                yield encode_string(child.key)  # type: ignore[arg-type]
                yield ": "
            yield from _emit(child, space, level + 1)
        yield "\n" + space * level + closing
    else:
        raise ValueError(f"invalid tag {tag!r}")


def stringify(node: JsonNode, space: str | None = None) -> str:
    """Encode ``node``; with ``space`` each nesting level is indented by it."""
    return "".join(_emit(node, space, 0))


def encode(node: JsonNode) -> str:
    """Encode ``node`` as compact JSON text."""
    return stringify(node, None)