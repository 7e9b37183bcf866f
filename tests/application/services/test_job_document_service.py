from __future__ import annotations

from application.services.job_document_service import JobDocumentService
from domain.job import JobConfiguration
from domain.steps import BatchletStep, Transition, TransitionAction


class FakeLogger:
    def __init__(self, bound: dict[str, object] | None = None, events: list[dict[str, object]] | None = None) -> None:
        self.bound = bound or {}
        self.events = [] if events is None else events

    def bind(self, **fields: object) -> "FakeLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return FakeLogger(bound=merged, events=self.events)

    def _record(self, level: str, event: str, fields: dict[str, object]) -> None:
        payload = dict(self.bound)
        payload.update(fields)
        payload["type"] = event
        payload["level"] = level
        self.events.append(payload)

    def debug(self, event: str, **fields: object) -> None:
        self._record("debug", event, fields)

    def info(self, event: str, **fields: object) -> None:
        self._record("info", event, fields)

    def warning(self, event: str, **fields: object) -> None:
        self._record("warning", event, fields)

    def error(self, event: str, **fields: object) -> None:
        self._record("error", event, fields)


def _config(batchlet_class: str = "com.example.MyBatchlet") -> JobConfiguration:
    return JobConfiguration(
        name="TEST_JOB",
        steps=[
            BatchletStep(
                name="step_one",
                batchlet_class=batchlet_class,
                transitions=[Transition(on="COMPLETED", action=TransitionAction.END)],
            )
        ],
    )


def test_build_generates_validates_and_formats() -> None:
    # Arrange
    logger = FakeLogger()
    service = JobDocumentService(logger=logger)

    # Act
    document = service.build(_config())

    # Assert
    assert document.job_name == "TEST_JOB"
    assert document.is_valid
    assert '<job id="TEST_JOB"' in document.xml
    assert document.report.startswith("✅ XML is valid JSR-352 format")
    assert [e["type"] for e in logger.events] == ["job_xml.generated", "job_xml.validated"]
    assert all(e["job"] == "TEST_JOB" for e in logger.events)
    assert logger.events[0]["steps"] == 1


def test_invalid_document_is_logged_as_warning() -> None:
    logger = FakeLogger()
    service = JobDocumentService(logger=logger)

    document = service.build(_config(batchlet_class="MyBatchlet"))

    assert not document.is_valid
    validated = logger.events[-1]
    assert validated["level"] == "warning"
    assert validated["valid"] is False
    assert validated["errors"] == 1
    assert validated["first_error"] == 'Invalid Java class name: "MyBatchlet"'


def test_validate_and_report_on_raw_text() -> None:
    logger = FakeLogger()
    service = JobDocumentService(logger=logger)

    result = service.validate("not xml")
    report = service.report("not xml")

    assert not result.is_valid
    assert report.startswith("❌ XML validation failed")
    assert "[STRUCTURE] Invalid XML structure" in report
    assert len(logger.events) == 2
