# application/validation/report.py
from __future__ import annotations

from typing import List, Optional

from domain.validation_result import (
    ErrorCategory,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    WarningCategory,
)


class ValidationReport:
    """Collects findings while the rules run; frozen into a ValidationResult at the end."""

    def __init__(self) -> None:
        self._errors: List[ValidationError] = []
        self._warnings: List[ValidationWarning] = []

    def error(self, category: ErrorCategory, message: str, element: Optional[str] = None) -> None:
        self._errors.append(ValidationError(category=category, message=message, element=element))

    def warning(self, category: WarningCategory, message: str, element: Optional[str] = None) -> None:
        self._warnings.append(ValidationWarning(category=category, message=message, element=element))

    def to_result(self) -> ValidationResult:
        return ValidationResult(errors=list(self._errors), warnings=list(self._warnings))
