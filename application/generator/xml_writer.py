# application/generator/xml_writer.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

Attr = Tuple[str, Optional[object]]

_ATTR_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    # parsers normalise raw whitespace in attribute values to spaces
    ("\n", "&#10;"),
    ("\r", "&#13;"),
    ("\t", "&#9;"),
)


def escape_attr(value: object) -> str:
    text = format_value(value)
    for raw, entity in _ATTR_ESCAPES:
        text = text.replace(raw, entity)
    return text


def format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class XmlLineWriter:
    """
    Line based XML builder. Each nesting level indents by two spaces.
    Attributes whose value is None are skipped so callers can pass
    optional fields directly.
    """

    INDENT = "  "

    def __init__(self, depth: int = 0):
        self._lines: List[str] = []
        self._depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    def raw(self, line: str) -> None:
        self._lines.append(line)

    def open(self, tag: str, attrs: Iterable[Attr] = ()) -> None:
        self._lines.append(f"{self._pad()}<{tag}{self._attrs(attrs)}>")
        self._depth += 1

    def close(self, tag: str) -> None:
        self._depth -= 1
        self._lines.append(f"{self._pad()}</{tag}>")

    def empty(self, tag: str, attrs: Iterable[Attr] = ()) -> None:
        self._lines.append(f"{self._pad()}<{tag}{self._attrs(attrs)}/>")

    def comment(self, text: str) -> None:
        # "--" is not allowed inside an XML comment
        safe = text.replace("--", "- -")
        self._lines.append(f"{self._pad()}<!-- {safe} -->")

    def text(self) -> str:
        return "\n".join(self._lines) + "\n"

    def _pad(self) -> str:
        return self.INDENT * self._depth

    def _attrs(self, attrs: Iterable[Attr]) -> str:
        parts = [f' {name}="{escape_attr(value)}"' for name, value in attrs if value is not None]
        return "".join(parts)
