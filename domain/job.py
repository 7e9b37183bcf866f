# domain/job.py
"""
Job configuration aggregate
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps import StepEntity


@dataclass(frozen=True)
class PropertyEntry:
    name: str
    value: Optional[str] = None  # None => job parameter placeholder

    def resolved_value(self) -> str:
        if self.value is None:
            return "#{jobParameters['" + self.name + "']}"
        return self.value


@dataclass(frozen=True)
class StepRestartDefaults:
    restartable: bool = True
    start_limit: int = 1
    allow_start_if_complete: bool = False


@dataclass(frozen=True)
class RestartPolicy:
    restartable: bool = True
    step_defaults: Optional[StepRestartDefaults] = None


@dataclass(frozen=True)
class JobConfiguration:
    """
    Root of the model handed over by the wizard once every screen is filled.

    `name` becomes the job id. Ordering of properties, listeners and steps is
    preserved in the generated document.
    """
    name: str
    steps: List[StepEntity] = field(default_factory=list)
    restart_policy: Optional[RestartPolicy] = None
    properties: List[PropertyEntry] = field(default_factory=list)
    listeners: List[str] = field(default_factory=list)
