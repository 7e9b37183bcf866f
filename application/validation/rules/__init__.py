from application.validation.rules.attributes import AttributeRule
from application.validation.rules.base import DocumentRule
from application.validation.rules.best_practices import BestPracticeRule
from application.validation.rules.content import ContentRule
from application.validation.rules.structure import StructureRule

__all__ = [
    "DocumentRule",
    "StructureRule",
    "ContentRule",
    "AttributeRule",
    "BestPracticeRule",
]
