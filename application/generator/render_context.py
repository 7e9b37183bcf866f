# application/generator/render_context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

from application.generator.xml_writer import XmlLineWriter
from domain.job import JobConfiguration

if TYPE_CHECKING:
    from application.generator.renderer_registry import RendererRegistry


@dataclass(frozen=True)
class RenderContext:
    job: JobConfiguration
    writer: XmlLineWriter
    registry: "RendererRegistry"

    def render_steps(self, steps: Iterable[object]) -> None:
        # nesting depth lives in the writer, so nested flows indent naturally
        for step in steps:
            self.registry.get_renderer(step).render(step, self)
