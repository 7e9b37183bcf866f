# application/reporting/report_formatter.py
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from domain.validation_result import ValidationError, ValidationResult, ValidationWarning

VALID_BANNER = "✅ XML is valid JSR-352 format"
INVALID_BANNER = "❌ XML validation failed"
ERRORS_HEADING = "🚨 ERRORS:"
WARNINGS_HEADING = "⚠️ WARNINGS:"

Finding = Union[ValidationError, ValidationWarning]


def format_report(result: ValidationResult) -> str:
    """
    Render a validation result as plain text.

    Example:
        ❌ XML validation failed

        🚨 ERRORS:
        1. [ATTRIBUTE] Attribute "restartable" must be "true" or "false" (job)
    """
    lines: List[str] = [VALID_BANNER if result.is_valid else INVALID_BANNER, ""]

    if result.errors:
        lines.append(ERRORS_HEADING)
        lines.extend(_numbered(result.errors))
        lines.append("")

    if result.warnings:
        lines.append(WARNINGS_HEADING)
        lines.extend(_numbered(result.warnings))

    return "\n".join(lines).rstrip("\n") + "\n"


def _numbered(findings: Sequence[Finding]) -> List[str]:
    return [f"{index}. {_format_finding(finding)}" for index, finding in enumerate(findings, start=1)]


def _format_finding(finding: Finding) -> str:
    category = _category_value(finding.category)
    text = f"[{category.upper()}] {finding.message}"
    element: Optional[str] = finding.element
    if element:
        text += f" ({element})"
    return text


def _category_value(category: object) -> str:
    return getattr(category, "value", str(category))
