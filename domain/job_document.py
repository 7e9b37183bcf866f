# domain/job_document.py
"""
Markers identifying a generated job document.

The root tag, namespace URI and version together form the compatibility
contract: consumers recognise the file only when all three match.
"""
from __future__ import annotations

JOB_ROOT_TAG = "job"
JOB_NAMESPACE = "http://xmlns.jcp.org/xml/ns/javaee"
JOB_SCHEMA_VERSION = "1.0"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

DEFAULT_JOB_FILENAME_STEM = "batch-job"
