# domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from domain.job import PropertyEntry


class StepKind(str, Enum):
    BATCHLET = "batchlet"
    CHUNK = "chunk"
    PARTITIONED_CHUNK = "chunk_partition"
    DECISION = "decision"
    SPLIT = "split"
    FLOW = "flow"


class TransitionAction(str, Enum):
    NEXT = "next"
    FAIL = "fail"
    STOP = "stop"
    END = "end"


@dataclass(frozen=True)
class Transition:
    on: str                            # exit status pattern, e.g. "COMPLETED" or "*"
    action: TransitionAction
    to: Optional[str] = None           # only meaningful for NEXT
    exit_status: Optional[str] = None


@dataclass(frozen=True)
class ExecutionContext:
    jsl_name: Optional[str] = None
    abstract: bool = False


@dataclass(frozen=True)
class Step:
    name: str

    kind: ClassVar[StepKind]


@dataclass(frozen=True)
class ExecutableStep(Step):
    """Common shape of the kinds rendered as a `<step>` element."""
    properties: List["PropertyEntry"] = field(default_factory=list, kw_only=True)
    listeners: List[str] = field(default_factory=list, kw_only=True)
    execution_context: Optional[ExecutionContext] = field(default=None, kw_only=True)
    transitions: List[Transition] = field(default_factory=list, kw_only=True)
