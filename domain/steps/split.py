# domain/steps/split.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.steps.base import Step, StepKind
from domain.steps.flow import FlowStep


@dataclass(frozen=True)
class SplitStep(Step):
    flows: List[FlowStep] = field(default_factory=list)  # run in parallel, two or more expected
    next_step: Optional[str] = None

    kind = StepKind.SPLIT
