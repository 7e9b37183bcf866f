# application/validation/job_xml_validator.py
from __future__ import annotations

from typing import List, Optional

from lxml import etree

from application.validation.report import ValidationReport
from application.validation.rules import (
    AttributeRule,
    BestPracticeRule,
    ContentRule,
    DocumentRule,
    StructureRule,
)
from domain.validation_result import ErrorCategory, ValidationResult


class JobXmlValidator:
    """
    Parses a candidate job document and runs every rule against it.

    A document that cannot be parsed yields a single structure error and no
    rule runs. Otherwise all rules run and their findings accumulate.
    """

    def __init__(self, rules: Optional[List[DocumentRule]] = None):
        self._rules = rules if rules is not None else self.default_rules()

    @staticmethod
    def default_rules() -> List[DocumentRule]:
        return [StructureRule(), ContentRule(), AttributeRule(), BestPracticeRule()]

    def validate(self, xml: str) -> ValidationResult:
        report = ValidationReport()
        try:
            root = self._parse(xml)
        except (etree.XMLSyntaxError, ValueError, TypeError) as exc:
            report.error(ErrorCategory.STRUCTURE, f"Invalid XML structure: {exc}")
            return report.to_result()

        for rule in self._rules:
            rule.check(root, report)
        return report.to_result()

    def _parse(self, xml: str) -> etree._Element:
        if not isinstance(xml, str):
            raise TypeError(f"expected XML text, got {type(xml).__name__}")
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        # bytes input so that an encoding declaration is accepted
        return etree.fromstring(xml.encode("utf-8"), parser)


def validate_job_xml(xml: str) -> ValidationResult:
    return JobXmlValidator().validate(xml)
