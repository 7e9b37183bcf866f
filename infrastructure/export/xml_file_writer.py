# infrastructure/export/xml_file_writer.py
from __future__ import annotations

import re
from pathlib import Path

from domain.job_document import DEFAULT_JOB_FILENAME_STEM

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class JobXmlFileWriter:
    """Saves generated documents as `<job name>.xml` under output_dir."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def filename_for(self, job_name: str) -> str:
        stem = _UNSAFE_FILENAME_CHARS.sub("_", job_name.strip()).strip("._")
        return f"{stem or DEFAULT_JOB_FILENAME_STEM}.xml"

    def write(self, job_name: str, xml: str) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / self.filename_for(job_name)
        path.write_text(xml, encoding="utf-8")
        return path
