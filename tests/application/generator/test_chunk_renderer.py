from __future__ import annotations

from application.generator.job_xml_generator import generate_job_xml
from application.validation.job_xml_validator import validate_job_xml
from domain.job import JobConfiguration, PropertyEntry
from domain.steps import (
    CheckpointConfig,
    ChunkStep,
    ExceptionClassFilter,
    PartitionConfig,
    PartitionedChunkStep,
)


def _generate(step) -> str:
    return generate_job_xml(JobConfiguration(name="J", steps=[step]))


def test_item_checkpoint_chunk() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        processor_class="com.example.Processor",
        writer_class="com.example.Writer",
        checkpoint=CheckpointConfig(enabled=True, item_count=50, time_limit=30),
    )

    xml = _generate(step)

    assert (
        '  <step id="load">\n'
        '    <chunk checkpoint-policy="item" item-count="50" time-limit="30">\n'
        '      <reader ref="com.example.Reader"/>\n'
        '      <processor ref="com.example.Processor"/>\n'
        '      <writer ref="com.example.Writer"/>\n'
        "    </chunk>\n"
        "  </step>\n"
    ) in xml


def test_disabled_checkpoint_leaves_chunk_without_policy() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        checkpoint=CheckpointConfig(enabled=False, item_count=50),
    )

    assert "    <chunk>\n" in _generate(step)


def test_custom_checkpoint_algorithm() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        checkpoint=CheckpointConfig(
            enabled=True,
            custom_policy="com.example.Policy",
            custom_policy_properties=[PropertyEntry(name="interval", value="5")],
        ),
    )

    xml = _generate(step)

    assert (
        '    <chunk checkpoint-policy="custom">\n'
        '      <checkpoint-algorithm ref="com.example.Policy">\n'
        "        <properties>\n"
        '          <property name="interval" value="5"/>\n'
        "        </properties>\n"
        "      </checkpoint-algorithm>\n"
        '      <reader ref="com.example.Reader"/>\n'
    ) in xml


def test_processor_can_be_switched_off() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        processor_class="com.example.Processor",
        add_processor=False,
        writer_class="com.example.Writer",
    )

    assert "<processor" not in _generate(step)


def test_exception_classes_and_limits() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        skippable=ExceptionClassFilter(
            include=["java.lang.IllegalArgumentException"],
            exclude=["java.io.FileNotFoundException"],
        ),
        retryable=ExceptionClassFilter(include=["java.sql.SQLException"]),
        no_rollback=["java.lang.IllegalStateException"],
        skip_limit=10,
        retry_limit=3,
    )

    xml = _generate(step)

    assert '<chunk skip-limit="10" retry-limit="3">' in xml
    assert (
        '      <reader ref="com.example.Reader"/>\n'
        "      <skippable-exception-classes>\n"
        '        <include class="java.lang.IllegalArgumentException"/>\n'
        '        <exclude class="java.io.FileNotFoundException"/>\n'
        "      </skippable-exception-classes>\n"
        "      <retryable-exception-classes>\n"
        '        <include class="java.sql.SQLException"/>\n'
        "      </retryable-exception-classes>\n"
        "      <no-rollback-exception-classes>\n"
        '        <include class="java.lang.IllegalStateException"/>\n'
        "      </no-rollback-exception-classes>\n"
        '      <writer ref="com.example.Writer"/>\n'
    ) in xml


def test_partitioned_chunk_uses_partitioner_by_default() -> None:
    step = PartitionedChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        partitioner_class="com.example.Partitioner",
    )

    xml = _generate(step)

    assert (
        '      <writer ref="com.example.Writer"/>\n'
        "      <partition>\n"
        '        <partitioner ref="com.example.Partitioner"/>\n'
        "      </partition>\n"
        "    </chunk>\n"
    ) in xml


def test_advanced_partition_with_mapper() -> None:
    step = PartitionedChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        partitioner_class="com.example.Partitioner",
        partition=PartitionConfig(
            enabled=True,
            mapper_class="com.example.Mapper",
            partition_count=4,
            collector_class="com.example.Collector",
            analyzer_class="com.example.Analyzer",
            reducer_class="com.example.Reducer",
        ),
    )

    xml = _generate(step)

    assert (
        "      <partition>\n"
        '        <mapper ref="com.example.Mapper"/>\n'
        '        <collector ref="com.example.Collector"/>\n'
        '        <analyzer ref="com.example.Analyzer"/>\n'
        '        <reducer ref="com.example.Reducer"/>\n'
        "      </partition>\n"
    ) in xml
    assert "partitioner" not in xml
    assert "<plan" not in xml


def test_advanced_partition_with_plan() -> None:
    step = PartitionedChunkStep(
        name="load",
        reader_class="com.example.Reader",
        writer_class="com.example.Writer",
        partition=PartitionConfig(enabled=True, partition_count=4),
    )

    assert '        <plan partitions="4"/>\n' in _generate(step)


def test_generated_chunk_with_checkpoint_and_exception_handling_has_no_chunk_findings() -> None:
    step = ChunkStep(
        name="load",
        reader_class="com.example.Reader",
        processor_class="com.example.Processor",
        writer_class="com.example.Writer",
        checkpoint=CheckpointConfig(enabled=True, item_count=10),
        skippable=ExceptionClassFilter(include=["java.lang.Exception"]),
    )

    result = validate_job_xml(_generate(step))

    assert result.is_valid
    assert all(w.element != "chunk" for w in result.warnings)
