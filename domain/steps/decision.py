# domain/steps/decision.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

from domain.steps.base import Step, StepKind, Transition

if TYPE_CHECKING:
    from domain.job import PropertyEntry


@dataclass(frozen=True)
class DecisionStep(Step):
    decider_class: str = ""
    properties: List["PropertyEntry"] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)  # a usable decision needs at least one

    kind = StepKind.DECISION
