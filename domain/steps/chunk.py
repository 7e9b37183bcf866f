# domain/steps/chunk.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from domain.steps.base import ExecutableStep, StepKind

if TYPE_CHECKING:
    from domain.job import PropertyEntry


@dataclass(frozen=True)
class CheckpointConfig:
    enabled: bool = False
    item_count: Optional[int] = None
    time_limit: Optional[int] = None       # seconds
    custom_policy: Optional[str] = None    # checkpoint algorithm class
    custom_policy_properties: List["PropertyEntry"] = field(default_factory=list)


@dataclass(frozen=True)
class ExceptionClassFilter:
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.include and not self.exclude


@dataclass(frozen=True)
class PartitionConfig:
    """
    Advanced partitioning. Either `mapper_class` or `partition_count`
    defines the plan; the mapper wins when both are given.
    """
    enabled: bool = False
    mapper_class: Optional[str] = None
    partition_count: Optional[int] = None
    collector_class: Optional[str] = None
    analyzer_class: Optional[str] = None
    reducer_class: Optional[str] = None


@dataclass(frozen=True)
class ChunkStep(ExecutableStep):
    reader_class: str = ""
    writer_class: str = ""
    processor_class: Optional[str] = None
    add_processor: bool = True
    checkpoint: Optional[CheckpointConfig] = None
    skippable: ExceptionClassFilter = field(default_factory=ExceptionClassFilter)
    retryable: ExceptionClassFilter = field(default_factory=ExceptionClassFilter)
    no_rollback: List[str] = field(default_factory=list)
    skip_limit: Optional[int] = None
    retry_limit: Optional[int] = None

    kind = StepKind.CHUNK


@dataclass(frozen=True)
class PartitionedChunkStep(ChunkStep):
    partitioner_class: Optional[str] = None
    partition: Optional[PartitionConfig] = None

    kind = StepKind.PARTITIONED_CHUNK
