# application/validation/rules/content.py
from __future__ import annotations

import re
from typing import Set

from lxml import etree

from application.validation.report import ValidationReport
from application.validation.rules.base import DocumentRule
from application.validation.tree import iter_elements, local_name
from domain.validation_result import ErrorCategory

# lowercase dotted package followed by a capitalised class name
CLASS_NAME_PATTERN = re.compile(r"^([a-z][a-z0-9_]*\.)+[A-Z][A-Za-z0-9_]*$")


def is_valid_class_name(value: str) -> bool:
    return CLASS_NAME_PATTERN.match(value) is not None


class ContentRule(DocumentRule):
    def check(self, root: etree._Element, report: ValidationReport) -> None:
        seen: Set[str] = set()
        for el in iter_elements(root):
            element_id = el.get("id")
            if element_id:
                if element_id in seen:
                    report.error(
                        ErrorCategory.CONTENT,
                        f'Duplicate ID "{element_id}" found',
                        local_name(el),
                    )
                seen.add(element_id)

            ref = el.get("ref")
            if ref and not is_valid_class_name(ref):
                report.error(
                    ErrorCategory.CONTENT,
                    f'Invalid Java class name: "{ref}"',
                    local_name(el),
                )
