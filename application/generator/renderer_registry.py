# application/generator/renderer_registry.py
from __future__ import annotations

from typing import List, Optional

from application.generator.renderers.base import StepRenderer
from domain.exceptions import UnsupportedStepError


class RendererRegistry:
    def __init__(self, renderers: List[StepRenderer]):
        self._renderers = renderers

    def get_renderer(self, step: object) -> StepRenderer:
        for r in self._renderers:
            if r.supports(step):
                return r
        name: Optional[str] = getattr(step, "name", None)
        raise UnsupportedStepError(f"No renderer found for step: {type(step).__name__} ({name})")

    @classmethod
    def default(cls) -> "RendererRegistry":
        from application.generator.renderers import (
            BatchletRenderer,
            ChunkRenderer,
            DecisionRenderer,
            FlowRenderer,
            SplitRenderer,
        )

        return cls(
            [
                BatchletRenderer(),
                ChunkRenderer(),
                DecisionRenderer(),
                SplitRenderer(),
                FlowRenderer(),
            ]
        )
