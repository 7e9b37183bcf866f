# infrastructure/config/job_config_mapper.py
"""
Build JobConfiguration objects from plain dicts.

Keys may be written in snake_case or in the camelCase the wizard exports
(`stepName`, `batchletClass`, `jobRestartConfig`, ...). Step types accept
both kind names and the wizard's codes (A = batchlet, B = chunk,
C = chunk with partition).
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from domain.job import JobConfiguration, PropertyEntry, RestartPolicy, StepRestartDefaults
from domain.steps import (
    BatchletStep,
    CheckpointConfig,
    ChunkStep,
    DecisionStep,
    ExceptionClassFilter,
    ExecutionContext,
    FlowStep,
    PartitionConfig,
    PartitionedChunkStep,
    SplitStep,
    StepEntity,
    StepKind,
    Transition,
    TransitionAction,
)
from infrastructure.config.errors import ConfigLoadError

_STEP_TYPE_ALIASES: Dict[str, StepKind] = {
    "a": StepKind.BATCHLET,
    "b": StepKind.CHUNK,
    "c": StepKind.PARTITIONED_CHUNK,
    "chunk-partition": StepKind.PARTITIONED_CHUNK,
    "partitioned_chunk": StepKind.PARTITIONED_CHUNK,
}


# batchProperties the wizard offers, with the value used when enabled but left blank
_WIZARD_PROPERTY_DEFAULTS: Dict[str, str] = {
    "pageSize": "100",
    "inputFilePattern": "*.csv",
    "archiveFolder": "/archive/#{jobParameters['asOfDate']}",
    "outputFolder": "/output",
    "timestampFormat": "yyyyMMdd_HHmmss",
}

_TRUE_STRINGS = ("true", "yes", "1")
_FALSE_STRINGS = ("false", "no", "0")


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping, got {data!r}")
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_list(value: Any, field_name: str) -> List[Any]:
    if not isinstance(value, list):
        raise ConfigLoadError(f"{field_name} must be a list, got {value!r}")
    return value


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ConfigLoadError(f"{field_name} must be true or false, got {value!r}")


def _to_int(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigLoadError(f"{field_name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigLoadError(f"{field_name} must be an integer, got {value!r}") from None


class JobConfigMapper:
    def to_job(self, data: Dict[str, Any]) -> JobConfiguration:
        return JobConfiguration(
            name=str(_get(data, "name", "batchName", "id", default="")),
            restart_policy=self._load_restart_policy(_get(data, "restart_policy", "jobRestartConfig")),
            properties=self._load_properties(_get(data, "properties", "batchProperties", default=[])),
            listeners=self._load_listeners(_get(data, "listeners", "batchListeners", default=[])),
            steps=self._load_steps(_get(data, "steps", "stepItems", default=[])),
        )

    def _load_restart_policy(self, data: Optional[Dict[str, Any]]) -> Optional[RestartPolicy]:
        if not data:
            return None
        defaults_data = _get(data, "step_defaults", "stepRestartConfig")
        step_defaults = None
        if defaults_data:
            step_defaults = StepRestartDefaults(
                restartable=_to_bool(_get(defaults_data, "restartable", default=True), "restartable"),
                start_limit=_to_int(_get(defaults_data, "start_limit", "startLimit", default=1), "start_limit"),
                allow_start_if_complete=_to_bool(
                    _get(defaults_data, "allow_start_if_complete", "allowStartIfComplete", default=False),
                    "allow_start_if_complete",
                ),
            )
        return RestartPolicy(
            restartable=_to_bool(_get(data, "restartable", default=True), "restartable"),
            step_defaults=step_defaults,
        )

    def _load_properties(self, data: Any) -> List[PropertyEntry]:
        # {"pageSize": "100"}, {"pageSize": {"enabled": true, "defaultValue": "100"}}
        # or [{"name": "pageSize", "value": "100"}]
        if isinstance(data, dict):
            return self._load_property_mapping(data)
        entries: List[PropertyEntry] = []
        for item in _as_list(data, "properties"):
            value = _get(item, "value", "defaultValue")
            entries.append(
                PropertyEntry(
                    name=str(_get(item, "name", "key", default="")),
                    value=None if value is None else str(value),
                )
            )
        return entries

    def _load_property_mapping(self, data: Dict[str, Any]) -> List[PropertyEntry]:
        entries: List[PropertyEntry] = []
        for name, value in data.items():
            if name == "customProperties":
                entries.extend(self._load_custom_properties(_as_list(value, "customProperties")))
                continue
            if isinstance(value, dict):
                if not _to_bool(_get(value, "enabled", default=True), f"{name}.enabled"):
                    continue
                value = _get(value, "value", "defaultValue")
                if value is None or value == "":
                    value = _WIZARD_PROPERTY_DEFAULTS.get(name)
            elif isinstance(value, bool):
                # `asOfDate: true` only switches the job parameter on
                if not value:
                    continue
                value = None
            entries.append(PropertyEntry(name=str(name), value=None if value is None else str(value)))
        return entries

    def _load_custom_properties(self, data: List[Any]) -> List[PropertyEntry]:
        # a blank defaultValue falls back to the job parameter of the same name
        return [
            PropertyEntry(name=entry.name, value=entry.value or None)
            for entry in self._load_properties(data)
        ]

    def _load_listeners(self, data: Any) -> List[str]:
        listeners: List[str] = []
        for item in _as_list(data, "listeners"):
            if isinstance(item, dict):
                listeners.append(str(_get(item, "ref", "listenerName", "name", default="")))
            else:
                listeners.append(str(item))
        return listeners

    def _load_steps(self, steps_data: Any) -> List[StepEntity]:
        return [self._load_step(step_data) for step_data in _as_list(steps_data, "steps")]

    def _load_step(self, data: Dict[str, Any]) -> StepEntity:
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Step definition must be a mapping: {data!r}")

        kind = self._resolve_kind(str(_get(data, "kind", "type", default="")))
        loaders: Dict[StepKind, Callable[[Dict[str, Any]], StepEntity]] = {
            StepKind.BATCHLET: self._load_batchlet,
            StepKind.CHUNK: self._load_chunk,
            StepKind.PARTITIONED_CHUNK: self._load_partitioned_chunk,
            StepKind.DECISION: self._load_decision,
            StepKind.SPLIT: self._load_split,
            StepKind.FLOW: self._load_flow,
        }
        return loaders[kind](data)

    def _resolve_kind(self, raw: str) -> StepKind:
        key = raw.strip().lower()
        if key in _STEP_TYPE_ALIASES:
            return _STEP_TYPE_ALIASES[key]
        try:
            return StepKind(key)
        except ValueError:
            raise ConfigLoadError(f"Unknown step type: {raw!r}") from None

    def _step_name(self, data: Dict[str, Any]) -> str:
        return str(_get(data, "name", "stepName", "flowName", "id", default=""))

    def _executable_kwargs(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "name": self._step_name(data),
            "properties": self._load_properties(_get(data, "properties", "stepProperties", default=[])),
            "listeners": self._load_listeners(_get(data, "listeners", default=[])),
            "execution_context": self._load_execution_context(
                _get(data, "execution_context", "executionContext")
            ),
            "transitions": self._load_transitions(_get(data, "transitions", default=[])),
        }

    def _load_execution_context(self, data: Optional[Dict[str, Any]]) -> Optional[ExecutionContext]:
        if not data:
            return None
        return ExecutionContext(
            jsl_name=_get(data, "jsl_name", "jslName"),
            abstract=_to_bool(_get(data, "abstract", default=False), "abstract"),
        )

    def _load_transitions(self, data: Any) -> List[Transition]:
        transitions: List[Transition] = []
        for item in _as_list(data, "transitions"):
            action = str(_get(item, "action", default="")).lower()
            try:
                parsed = TransitionAction(action)
            except ValueError:
                raise ConfigLoadError(f"Unknown transition action: {action!r}") from None
            on = _get(item, "on")
            if on is None:
                # YAML 1.1 reads a bare `on:` key as boolean true
                on = item.get(True, "*")
            transitions.append(
                Transition(
                    on=str(on),
                    action=parsed,
                    to=_get(item, "to"),
                    exit_status=_get(item, "exit_status", "exitStatus"),
                )
            )
        return transitions

    def _load_batchlet(self, data: Dict[str, Any]) -> BatchletStep:
        return BatchletStep(
            batchlet_class=_get(data, "batchlet_class", "batchletClass", default=""),
            **self._executable_kwargs(data),
        )

    def _chunk_kwargs(self, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = self._executable_kwargs(data)
        kwargs.update(
            reader_class=_get(data, "reader_class", "readerClass", default=""),
            writer_class=_get(data, "writer_class", "writerClass", default=""),
            processor_class=_get(data, "processor_class", "processorClass"),
            add_processor=_to_bool(_get(data, "add_processor", "addProcessor", default=True), "add_processor"),
            checkpoint=self._load_checkpoint(_get(data, "checkpoint", "checkpointConfig")),
            skippable=self._load_exception_filter(
                _get(data, "skippable"),
                _get(data, "skipExceptionClasses", default=[]),
                _get(data, "skipExcludeClasses", default=[]),
            ),
            retryable=self._load_exception_filter(
                _get(data, "retryable"),
                _get(data, "retryExceptionClasses", default=[]),
                _get(data, "retryExcludeClasses", default=[]),
            ),
            no_rollback=list(
                _as_list(_get(data, "no_rollback", "noRollbackExceptionClasses", default=[]), "no_rollback")
            ),
            skip_limit=_to_int(_get(data, "skip_limit", "skipLimit"), "skip_limit"),
            retry_limit=_to_int(_get(data, "retry_limit", "retryLimit"), "retry_limit"),
        )
        return kwargs

    def _load_chunk(self, data: Dict[str, Any]) -> ChunkStep:
        return ChunkStep(**self._chunk_kwargs(data))

    def _load_partitioned_chunk(self, data: Dict[str, Any]) -> PartitionedChunkStep:
        return PartitionedChunkStep(
            partitioner_class=_get(data, "partitioner_class", "partitionerClass"),
            partition=self._load_partition(_get(data, "partition", "advancedPartitionConfig")),
            **self._chunk_kwargs(data),
        )

    def _load_checkpoint(self, data: Optional[Dict[str, Any]]) -> Optional[CheckpointConfig]:
        if not data:
            return None
        return CheckpointConfig(
            enabled=_to_bool(_get(data, "enabled", default=False), "enabled"),
            item_count=_to_int(_get(data, "item_count", "itemCount"), "item_count"),
            time_limit=_to_int(_get(data, "time_limit", "timeLimit"), "time_limit"),
            custom_policy=_get(data, "custom_policy", "customPolicy"),
            custom_policy_properties=self._load_properties(
                _get(data, "custom_policy_properties", "customPolicyProperties", default=[])
            ),
        )

    def _load_exception_filter(
        self,
        data: Optional[Dict[str, Any]],
        include: List[str],
        exclude: List[str],
    ) -> ExceptionClassFilter:
        if data:
            include = _get(data, "include", default=[])
            exclude = _get(data, "exclude", default=[])
        return ExceptionClassFilter(
            include=list(_as_list(include, "include")),
            exclude=list(_as_list(exclude, "exclude")),
        )

    def _load_partition(self, data: Optional[Dict[str, Any]]) -> Optional[PartitionConfig]:
        if not data:
            return None
        return PartitionConfig(
            enabled=_to_bool(_get(data, "enabled", default=False), "enabled"),
            mapper_class=_get(data, "mapper_class", "mapperClass"),
            partition_count=_to_int(_get(data, "partition_count", "partitionCount"), "partition_count"),
            collector_class=_get(data, "collector_class", "collectorClass"),
            analyzer_class=_get(data, "analyzer_class", "analyzerClass"),
            reducer_class=_get(data, "reducer_class", "reducerClass"),
        )

    def _load_decision(self, data: Dict[str, Any]) -> DecisionStep:
        return DecisionStep(
            name=self._step_name(data),
            decider_class=_get(data, "decider_class", "deciderClass", default=""),
            properties=self._load_properties(_get(data, "properties", "stepProperties", default=[])),
            transitions=self._load_transitions(_get(data, "transitions", default=[])),
        )

    def _load_split(self, data: Dict[str, Any]) -> SplitStep:
        return SplitStep(
            name=self._step_name(data),
            flows=[self._load_flow(flow_data) for flow_data in _as_list(_get(data, "flows", default=[]), "flows")],
            next_step=_get(data, "next_step", "nextStep"),
        )

    def _load_flow(self, data: Dict[str, Any]) -> FlowStep:
        return FlowStep(
            name=self._step_name(data),
            description=str(_get(data, "description", default="")),
            steps=self._load_steps(_get(data, "steps", default=[])),
            next_step=_get(data, "next_step", "nextStep"),
            jsl_name=_get(data, "jsl_name", "jslName"),
            abstract=_to_bool(_get(data, "abstract", default=False), "abstract"),
        )
