# application/generator/renderers/common.py
"""Fragments shared by several step renderers."""
from __future__ import annotations

from typing import List

from application.generator.xml_writer import XmlLineWriter
from domain.job import PropertyEntry
from domain.steps.base import Transition, TransitionAction


def write_properties(writer: XmlLineWriter, properties: List[PropertyEntry]) -> None:
    if not properties:
        return
    writer.open("properties")
    for prop in properties:
        writer.empty("property", [("name", prop.name), ("value", prop.resolved_value())])
    writer.close("properties")


def write_listeners(writer: XmlLineWriter, listeners: List[str]) -> None:
    if not listeners:
        return
    writer.open("listeners")
    for ref in listeners:
        writer.empty("listener", [("ref", ref)])
    writer.close("listeners")


def write_transitions(writer: XmlLineWriter, transitions: List[Transition]) -> None:
    for transition in transitions:
        action = TransitionAction(transition.action)
        if action is TransitionAction.NEXT:
            # a next without target cannot be expressed
            if transition.to:
                writer.empty("next", [("on", transition.on), ("to", transition.to)])
            continue
        writer.empty(
            action.value,
            [("on", transition.on), ("exit-status", transition.exit_status)],
        )


def write_next_after_all(writer: XmlLineWriter, next_step: str | None) -> None:
    if next_step:
        writer.empty("next", [("on", "*"), ("to", next_step)])
