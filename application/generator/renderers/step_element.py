# application/generator/renderers/step_element.py
from __future__ import annotations

from typing import Callable, List

from application.generator.render_context import RenderContext
from application.generator.renderers.common import (
    write_listeners,
    write_properties,
    write_transitions,
)
from application.generator.xml_writer import Attr, XmlLineWriter
from domain.steps.base import ExecutableStep


def write_step_element(
    step: ExecutableStep,
    ctx: RenderContext,
    write_implementation: Callable[[XmlLineWriter], None],
) -> None:
    """
    <step> wrapper shared by batchlet and chunk kinds:
    properties, listeners, implementation element, transitions.
    """
    writer = ctx.writer
    writer.open("step", _step_attrs(step, ctx))
    write_properties(writer, step.properties)
    write_listeners(writer, step.listeners)
    write_implementation(writer)
    write_transitions(writer, step.transitions)
    writer.close("step")


def _step_attrs(step: ExecutableStep, ctx: RenderContext) -> List[Attr]:
    attrs: List[Attr] = [("id", step.name)]

    policy = ctx.job.restart_policy
    defaults = policy.step_defaults if policy else None
    if defaults is not None:
        attrs.append(("restartable", defaults.restartable))
        attrs.append(("start-limit", defaults.start_limit))
        attrs.append(("allow-start-if-complete", defaults.allow_start_if_complete))

    context = step.execution_context
    if context is not None:
        attrs.append(("jsl-name", context.jsl_name or None))
        attrs.append(("abstract", True if context.abstract else None))
    return attrs
