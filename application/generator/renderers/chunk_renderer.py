# application/generator/renderers/chunk_renderer.py
from __future__ import annotations

from typing import List

from application.generator.render_context import RenderContext
from application.generator.renderers.base import StepRenderer
from application.generator.renderers.common import write_properties
from application.generator.renderers.step_element import write_step_element
from application.generator.xml_writer import Attr, XmlLineWriter
from domain.steps.chunk import ChunkStep, ExceptionClassFilter, PartitionedChunkStep


class ChunkRenderer(StepRenderer):
    """Renders both plain and partitioned chunk steps."""

    def supports(self, step) -> bool:
        return isinstance(step, ChunkStep)

    def render(self, step: ChunkStep, ctx: RenderContext) -> None:
        write_step_element(step, ctx, lambda writer: self._write_chunk(step, writer))

    def _write_chunk(self, step: ChunkStep, writer: XmlLineWriter) -> None:
        writer.open("chunk", self._chunk_attrs(step))

        checkpoint = step.checkpoint
        if checkpoint is not None and checkpoint.enabled and checkpoint.custom_policy:
            writer.open("checkpoint-algorithm", [("ref", checkpoint.custom_policy)])
            write_properties(writer, checkpoint.custom_policy_properties)
            writer.close("checkpoint-algorithm")

        if step.reader_class:
            writer.empty("reader", [("ref", step.reader_class)])
        if step.add_processor and step.processor_class:
            writer.empty("processor", [("ref", step.processor_class)])

        self._write_exception_filter(writer, "skippable-exception-classes", step.skippable)
        self._write_exception_filter(writer, "retryable-exception-classes", step.retryable)
        if step.no_rollback:
            self._write_exception_filter(
                writer,
                "no-rollback-exception-classes",
                ExceptionClassFilter(include=step.no_rollback),
            )

        if step.writer_class:
            writer.empty("writer", [("ref", step.writer_class)])

        if isinstance(step, PartitionedChunkStep):
            self._write_partition(step, writer)

        writer.close("chunk")

    def _chunk_attrs(self, step: ChunkStep) -> List[Attr]:
        attrs: List[Attr] = []
        checkpoint = step.checkpoint
        if checkpoint is not None and checkpoint.enabled:
            if checkpoint.custom_policy:
                attrs.append(("checkpoint-policy", "custom"))
            else:
                attrs.append(("checkpoint-policy", "item"))
                attrs.append(("item-count", checkpoint.item_count or None))
                attrs.append(("time-limit", checkpoint.time_limit or None))
        attrs.append(("skip-limit", step.skip_limit))
        attrs.append(("retry-limit", step.retry_limit))
        return attrs

    def _write_exception_filter(
        self, writer: XmlLineWriter, tag: str, classes: ExceptionClassFilter
    ) -> None:
        if classes.is_empty():
            return
        writer.open(tag)
        for name in classes.include:
            writer.empty("include", [("class", name)])
        for name in classes.exclude:
            writer.empty("exclude", [("class", name)])
        writer.close(tag)

    def _write_partition(self, step: PartitionedChunkStep, writer: XmlLineWriter) -> None:
        writer.open("partition")
        advanced = step.partition
        if advanced is not None and advanced.enabled:
            if advanced.mapper_class:
                writer.empty("mapper", [("ref", advanced.mapper_class)])
            elif advanced.partition_count:
                writer.empty("plan", [("partitions", advanced.partition_count)])
            if advanced.collector_class:
                writer.empty("collector", [("ref", advanced.collector_class)])
            if advanced.analyzer_class:
                writer.empty("analyzer", [("ref", advanced.analyzer_class)])
            if advanced.reducer_class:
                writer.empty("reducer", [("ref", advanced.reducer_class)])
        elif step.partitioner_class:
            writer.empty("partitioner", [("ref", step.partitioner_class)])
        writer.close("partition")
