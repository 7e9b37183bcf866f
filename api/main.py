"""FastAPI application - job XML generation and validation endpoints"""
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.services.job_document_service import JobDocument, JobDocumentService
from domain.validation_result import ValidationResult
from infrastructure.config.errors import ConfigLoadError
from infrastructure.config.file_finder import JobConfigFileFinder
from infrastructure.config.job_config_mapper import JobConfigMapper
from infrastructure.config.loader_registry import JobConfigLoaderRegistry
from infrastructure.export.xml_file_writer import JobXmlFileWriter
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.settings.env_settings import AppSettings


class GenerateJobXmlRequest(BaseModel):
    """Job configuration as exported by the wizard"""
    configuration: Dict[str, Any] = Field(description="Job configuration")
    save: bool = Field(default=False, description="Also write <job>.xml to the output directory")


class StoredJobXmlRequest(BaseModel):
    save: bool = Field(default=False, description="Also write <job>.xml to the output directory")


class ValidateXmlRequest(BaseModel):
    xml: str = Field(description="Job XML document")


class FindingResponse(BaseModel):
    category: str = Field(description="Finding category")
    message: str = Field(description="Finding message")
    element: Optional[str] = Field(default=None, description="Element the finding refers to")


class ValidationResponse(BaseModel):
    valid: bool = Field(description="True when no errors were found")
    errors: List[FindingResponse] = Field(default_factory=list)
    warnings: List[FindingResponse] = Field(default_factory=list)


class JobXmlResponse(BaseModel):
    job_name: str = Field(description="Job id")
    xml: str = Field(description="Generated document")
    validation: ValidationResponse
    report: str = Field(description="Human readable validation report")
    saved_path: Optional[str] = Field(default=None, description="Written file, when requested")


app = FastAPI(
    title="Job XML Builder",
    description="Generates and validates JSR-352 job documents",
    version="1.0.0",
)

SETTINGS = AppSettings.from_env()
setup_console_logging(SETTINGS.log_level)


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "jobxml"}


def _build_service() -> JobDocumentService:
    return JobDocumentService(logger=LoguruLogger().bind(component="api"))


def _to_validation_response(result: ValidationResult) -> ValidationResponse:
    return ValidationResponse(
        valid=result.is_valid,
        errors=[
            FindingResponse(category=e.category.value, message=e.message, element=e.element)
            for e in result.errors
        ],
        warnings=[
            FindingResponse(category=w.category.value, message=w.message, element=w.element)
            for w in result.warnings
        ],
    )


def _to_job_xml_response(document: JobDocument, save: bool) -> JobXmlResponse:
    saved_path = None
    if save:
        # invalid documents are never offered for download
        if not document.is_valid:
            raise HTTPException(
                status_code=422,
                detail={"message": "Document is invalid", "report": document.report},
            )
        writer = JobXmlFileWriter(SETTINGS.output_dir)
        saved_path = str(writer.write(document.job_name, document.xml))
    return JobXmlResponse(
        job_name=document.job_name,
        xml=document.xml,
        validation=_to_validation_response(document.result),
        report=document.report,
        saved_path=saved_path,
    )


def _load_stored_configuration(job_name: str):
    finder = JobConfigFileFinder(SETTINGS.config_dir)
    config_file = finder.find_by_name(job_name)
    if config_file is None:
        raise HTTPException(
            status_code=404,
            detail=f"Job configuration not found: {job_name}",
        )
    loader = JobConfigLoaderRegistry().get_loader(config_file)
    return loader.load_from_file(config_file)


@app.post("/jobs/xml", response_model=JobXmlResponse)
def generate_job_xml(request: GenerateJobXmlRequest = Body(...)) -> JobXmlResponse:
    """Generate a job document from an inline configuration."""
    try:
        config = JobConfigMapper().to_job(request.configuration)
    except ConfigLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    document = _build_service().build(config)
    return _to_job_xml_response(document, request.save)


@app.post("/jobs/{job_name}/xml", response_model=JobXmlResponse)
def generate_stored_job_xml(
    job_name: str,
    request: Optional[StoredJobXmlRequest] = Body(default=None),
) -> JobXmlResponse:
    """Generate a job document from a configuration file stored under JOBXML_CONFIG_DIR."""
    try:
        config = _load_stored_configuration(job_name)
    except ConfigLoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    document = _build_service().build(config)
    return _to_job_xml_response(document, request.save if request else False)


@app.post("/validations", response_model=ValidationResponse)
def validate_xml(request: ValidateXmlRequest = Body(...)) -> ValidationResponse:
    result = _build_service().validate(request.xml)
    return _to_validation_response(result)


@app.post("/validations/report", response_class=PlainTextResponse)
def validation_report(request: ValidateXmlRequest = Body(...)) -> str:
    return _build_service().report(request.xml)
