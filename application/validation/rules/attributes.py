# application/validation/rules/attributes.py
from __future__ import annotations

import re

from lxml import etree

from application.validation.report import ValidationReport
from application.validation.rules.base import DocumentRule
from application.validation.tree import iter_elements, local_name
from domain.validation_result import ErrorCategory

BOOLEAN_ATTRIBUTES = ("restartable", "abstract", "allow-start-if-complete")
POSITIVE_INT_ATTRIBUTES = ("start-limit", "item-count", "time-limit")

_INTEGER = re.compile(r"\s*[+]?\d+\s*")


def is_positive_int(value: str) -> bool:
    if _INTEGER.fullmatch(value) is None:
        return False
    return int(value) >= 1


class AttributeRule(DocumentRule):
    def check(self, root: etree._Element, report: ValidationReport) -> None:
        for el in iter_elements(root):
            name = local_name(el)
            for attr in BOOLEAN_ATTRIBUTES:
                value = el.get(attr)
                if value is not None and value not in ("true", "false"):
                    report.error(
                        ErrorCategory.ATTRIBUTE,
                        f'Attribute "{attr}" must be "true" or "false"',
                        name,
                    )
            for attr in POSITIVE_INT_ATTRIBUTES:
                value = el.get(attr)
                if value is not None and not is_positive_int(value):
                    report.error(
                        ErrorCategory.ATTRIBUTE,
                        f'Attribute "{attr}" must be a positive integer',
                        name,
                    )
