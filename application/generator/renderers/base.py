# application/generator/renderers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from domain.steps.base import Step

if TYPE_CHECKING:
    from application.generator.render_context import RenderContext


class StepRenderer(ABC):
    @abstractmethod
    def supports(self, step: Step) -> bool: ...

    @abstractmethod
    def render(self, step: Step, ctx: "RenderContext") -> None: ...
