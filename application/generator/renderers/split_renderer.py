# application/generator/renderers/split_renderer.py
from __future__ import annotations

from application.generator.render_context import RenderContext
from application.generator.renderers.base import StepRenderer
from application.generator.renderers.common import write_next_after_all
from domain.steps.split import SplitStep


class SplitRenderer(StepRenderer):
    def supports(self, step) -> bool:
        return isinstance(step, SplitStep)

    def render(self, step: SplitStep, ctx: RenderContext) -> None:
        writer = ctx.writer
        writer.open("split", [("id", step.name)])
        # each flow is expanded through the same registry as top-level steps
        ctx.render_steps(step.flows)
        write_next_after_all(writer, step.next_step)
        writer.close("split")
