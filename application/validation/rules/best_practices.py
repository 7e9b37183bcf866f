# application/validation/rules/best_practices.py
from __future__ import annotations

from lxml import etree

from application.validation.report import ValidationReport
from application.validation.rules.base import DocumentRule
from application.validation.tree import has_child, iter_elements, local_name, nearest_ancestor
from domain.validation_result import WarningCategory


class BestPracticeRule(DocumentRule):
    """Advisory findings only. Never produces errors."""

    def check(self, root: etree._Element, report: ValidationReport) -> None:
        if not has_child(root, "properties"):
            report.warning(
                WarningCategory.BEST_PRACTICE,
                "Consider adding job-level properties for configuration",
                "job",
            )
        if not has_child(root, "listeners"):
            report.warning(
                WarningCategory.BEST_PRACTICE,
                "Consider adding job listeners for monitoring and logging",
                "job",
            )

        for el in iter_elements(root):
            name = local_name(el)
            if name == "chunk" and el.get("checkpoint-policy") is None:
                report.warning(
                    WarningCategory.PERFORMANCE,
                    "Consider configuring checkpoint policy for better performance and restart capability",
                    "chunk",
                )
            elif name == "processor":
                chunk = nearest_ancestor(el, "chunk")
                if chunk is not None and not has_child(
                    chunk, "skippable-exception-classes", "retryable-exception-classes"
                ):
                    report.warning(
                        WarningCategory.BEST_PRACTICE,
                        "Consider adding exception handling for robust processing",
                        "chunk",
                    )
