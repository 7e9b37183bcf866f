# domain/validation_result.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorCategory(str, Enum):
    STRUCTURE = "structure"
    CONTENT = "content"
    ATTRIBUTE = "attribute"
    NAMESPACE = "namespace"


class WarningCategory(str, Enum):
    BEST_PRACTICE = "best-practice"
    PERFORMANCE = "performance"
    COMPATIBILITY = "compatibility"


@dataclass(frozen=True)
class ValidationError:
    category: ErrorCategory
    message: str
    element: Optional[str] = None


@dataclass(frozen=True)
class ValidationWarning:
    category: WarningCategory
    message: str
    element: Optional[str] = None


@dataclass(frozen=True)
class ValidationResult:
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        # warnings never affect validity
        return not self.errors
