# application/generator/renderers/decision_renderer.py
from __future__ import annotations

from application.generator.render_context import RenderContext
from application.generator.renderers.base import StepRenderer
from application.generator.renderers.common import write_properties, write_transitions
from domain.steps.decision import DecisionStep


class DecisionRenderer(StepRenderer):
    def supports(self, step) -> bool:
        return isinstance(step, DecisionStep)

    def render(self, step: DecisionStep, ctx: RenderContext) -> None:
        writer = ctx.writer
        writer.open("decision", [("id", step.name)])
        write_properties(writer, step.properties)
        writer.empty("decider", [("ref", step.decider_class or None)])
        write_transitions(writer, step.transitions)
        writer.close("decision")
