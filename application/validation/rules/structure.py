# application/validation/rules/structure.py
from __future__ import annotations

from lxml import etree

from application.validation.report import ValidationReport
from application.validation.rules.base import DocumentRule
from application.validation.tree import (
    child_elements,
    has_child,
    iter_elements,
    local_name,
    namespace_of,
)
from domain.job_document import JOB_NAMESPACE, JOB_ROOT_TAG, JOB_SCHEMA_VERSION
from domain.validation_result import ErrorCategory

ALLOWED_JOB_CHILDREN = ("properties", "listeners", "step", "decision", "flow", "split")
STEP_IMPLEMENTATIONS = ("batchlet", "chunk")
CHECKPOINT_POLICIES = ("item", "custom")


class StructureRule(DocumentRule):
    """Root markers, allowed job children and the required parts of steps, chunks and flows."""

    def check(self, root: etree._Element, report: ValidationReport) -> None:
        root_name = local_name(root)
        if root_name != JOB_ROOT_TAG:
            report.error(ErrorCategory.STRUCTURE, f"Root element must be <{JOB_ROOT_TAG}>", root_name)
            return

        if namespace_of(root) != JOB_NAMESPACE:
            report.error(ErrorCategory.NAMESPACE, "Invalid or missing JSR-352 namespace", JOB_ROOT_TAG)

        if root.get("version") != JOB_SCHEMA_VERSION:
            report.error(
                ErrorCategory.ATTRIBUTE,
                f'JSR-352 version must be "{JOB_SCHEMA_VERSION}"',
                JOB_ROOT_TAG,
            )

        for child in child_elements(root):
            name = local_name(child)
            if name not in ALLOWED_JOB_CHILDREN:
                report.error(
                    ErrorCategory.STRUCTURE,
                    f"Invalid child element <{name}> in <{JOB_ROOT_TAG}>",
                    name,
                )

        for el in iter_elements(root):
            name = local_name(el)
            if name == "step":
                self._check_step(el, report)
            elif name == "chunk":
                self._check_chunk(el, report)
            elif name == "flow":
                self._check_flow(el, report)

    def _check_step(self, step: etree._Element, report: ValidationReport) -> None:
        if not step.get("id"):
            report.error(ErrorCategory.ATTRIBUTE, 'Step element must have an "id" attribute', "step")
        if not has_child(step, *STEP_IMPLEMENTATIONS):
            report.error(
                ErrorCategory.CONTENT,
                "Step must contain either <batchlet> or <chunk> element",
                "step",
            )

    def _check_chunk(self, chunk: etree._Element, report: ValidationReport) -> None:
        if not has_child(chunk, "reader"):
            report.error(ErrorCategory.CONTENT, "<chunk> must contain a <reader> element", "chunk")
        if not has_child(chunk, "writer"):
            report.error(ErrorCategory.CONTENT, "<chunk> must contain a <writer> element", "chunk")

        policy = chunk.get("checkpoint-policy")
        if policy is not None and policy not in CHECKPOINT_POLICIES:
            report.error(
                ErrorCategory.ATTRIBUTE,
                'Invalid checkpoint-policy. Must be "item" or "custom"',
                "chunk",
            )

    def _check_flow(self, flow: etree._Element, report: ValidationReport) -> None:
        if not flow.get("id"):
            report.error(ErrorCategory.ATTRIBUTE, 'Flow element must have an "id" attribute', "flow")
