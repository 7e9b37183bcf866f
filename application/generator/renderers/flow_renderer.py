# application/generator/renderers/flow_renderer.py
from __future__ import annotations

from application.generator.render_context import RenderContext
from application.generator.renderers.base import StepRenderer
from application.generator.renderers.common import write_next_after_all
from domain.steps.flow import FlowStep


class FlowRenderer(StepRenderer):
    def supports(self, step) -> bool:
        return isinstance(step, FlowStep)

    def render(self, step: FlowStep, ctx: RenderContext) -> None:
        writer = ctx.writer
        writer.open(
            "flow",
            [
                ("id", step.name),
                ("jsl-name", step.jsl_name or None),
                ("abstract", True if step.abstract else None),
            ],
        )
        if step.steps:
            ctx.render_steps(step.steps)
        else:
            writer.comment(f"Flow: {step.description}")
            writer.comment("No steps configured for this flow")
        write_next_after_all(writer, step.next_step)
        writer.close("flow")
