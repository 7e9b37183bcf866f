# application/generator/renderers/batchlet_renderer.py
from __future__ import annotations

from application.generator.render_context import RenderContext
from application.generator.renderers.base import StepRenderer
from application.generator.renderers.step_element import write_step_element
from domain.steps.batchlet import BatchletStep


class BatchletRenderer(StepRenderer):
    def supports(self, step) -> bool:
        return isinstance(step, BatchletStep)

    def render(self, step: BatchletStep, ctx: RenderContext) -> None:
        write_step_element(
            step,
            ctx,
            lambda writer: writer.empty("batchlet", [("ref", step.batchlet_class or None)]),
        )
