# domain/steps/batchlet.py
from __future__ import annotations

from dataclasses import dataclass

from domain.steps.base import ExecutableStep, StepKind


@dataclass(frozen=True)
class BatchletStep(ExecutableStep):
    batchlet_class: str = ""

    kind = StepKind.BATCHLET
