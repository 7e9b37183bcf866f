# application/validation/rules/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from lxml import etree

from application.validation.report import ValidationReport


class DocumentRule(ABC):
    @abstractmethod
    def check(self, root: etree._Element, report: ValidationReport) -> None:
        ...
