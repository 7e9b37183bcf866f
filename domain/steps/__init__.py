from typing import Union

from domain.steps.base import (
    ExecutableStep,
    ExecutionContext,
    Step,
    StepKind,
    Transition,
    TransitionAction,
)
from domain.steps.batchlet import BatchletStep
from domain.steps.chunk import (
    CheckpointConfig,
    ChunkStep,
    ExceptionClassFilter,
    PartitionConfig,
    PartitionedChunkStep,
)
from domain.steps.decision import DecisionStep
from domain.steps.flow import FlowStep
from domain.steps.split import SplitStep

StepEntity = Union[
    BatchletStep,
    ChunkStep,
    PartitionedChunkStep,
    DecisionStep,
    SplitStep,
    FlowStep,
]

__all__ = [
    "Step",
    "StepKind",
    "StepEntity",
    "ExecutableStep",
    "ExecutionContext",
    "Transition",
    "TransitionAction",
    "BatchletStep",
    "ChunkStep",
    "PartitionedChunkStep",
    "CheckpointConfig",
    "ExceptionClassFilter",
    "PartitionConfig",
    "DecisionStep",
    "SplitStep",
    "FlowStep",
]
