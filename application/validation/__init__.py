from application.validation.job_xml_validator import JobXmlValidator, validate_job_xml

__all__ = ["JobXmlValidator", "validate_job_xml"]
