# application/services/job_document_service.py
from __future__ import annotations

from dataclasses import dataclass, field

from application.generator.job_xml_generator import JobXmlGenerator
from application.ports.logger import LoggerPort
from application.reporting.report_formatter import format_report
from application.validation.job_xml_validator import JobXmlValidator
from domain.job import JobConfiguration
from domain.validation_result import ValidationResult


@dataclass(frozen=True)
class JobDocument:
    job_name: str
    xml: str
    result: ValidationResult
    report: str

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid


@dataclass(frozen=True)
class JobDocumentService:
    """
    Entry point used by the outer surfaces (API, scripts).

    The generator, validator and formatter stay pure; this service is the
    only place that logs around them.
    """
    logger: LoggerPort
    generator: JobXmlGenerator = field(default_factory=JobXmlGenerator)
    validator: JobXmlValidator = field(default_factory=JobXmlValidator)

    def build(self, config: JobConfiguration) -> JobDocument:
        logger = self.logger.bind(job=config.name)
        xml = self.generator.generate(config)
        logger.info("job_xml.generated", steps=len(config.steps), chars=len(xml))

        result = self._validate(xml, logger)
        return JobDocument(
            job_name=config.name,
            xml=xml,
            result=result,
            report=format_report(result),
        )

    def validate(self, xml: str) -> ValidationResult:
        return self._validate(xml, self.logger)

    def report(self, xml: str) -> str:
        return format_report(self._validate(xml, self.logger))

    def _validate(self, xml: str, logger: LoggerPort) -> ValidationResult:
        result = self.validator.validate(xml)
        fields = dict(
            valid=result.is_valid,
            errors=len(result.errors),
            warnings=len(result.warnings),
        )
        if result.is_valid:
            logger.info("job_xml.validated", **fields)
        else:
            logger.warning(
                "job_xml.validated",
                first_error=result.errors[0].message,
                **fields,
            )
        return result
