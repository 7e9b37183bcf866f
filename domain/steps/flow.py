# domain/steps/flow.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from domain.steps.base import Step, StepKind

if TYPE_CHECKING:
    from domain.steps import StepEntity


@dataclass(frozen=True)
class FlowStep(Step):
    """
    Named sequence of steps. `steps` may hold any step kind, flows and
    splits included, so flows nest to any depth.
    """
    description: str = ""
    steps: List["StepEntity"] = field(default_factory=list)
    next_step: Optional[str] = None
    jsl_name: Optional[str] = None
    abstract: bool = False

    kind = StepKind.FLOW
