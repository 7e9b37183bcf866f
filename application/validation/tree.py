# application/validation/tree.py
"""Namespace-agnostic helpers over lxml element trees."""
from __future__ import annotations

from typing import Iterator, List, Optional

from lxml import etree


def local_name(el: etree._Element) -> str:
    return etree.QName(el).localname


def namespace_of(el: etree._Element) -> Optional[str]:
    return etree.QName(el).namespace


def iter_elements(root: etree._Element) -> Iterator[etree._Element]:
    # document order, comments and processing instructions skipped
    return root.iter(etree.Element)


def child_elements(el: etree._Element) -> List[etree._Element]:
    return [child for child in el if isinstance(child.tag, str)]


def has_child(el: etree._Element, *names: str) -> bool:
    return any(local_name(child) in names for child in child_elements(el))


def nearest_ancestor(el: etree._Element, name: str) -> Optional[etree._Element]:
    for ancestor in el.iterancestors():
        if local_name(ancestor) == name:
            return ancestor
    return None
