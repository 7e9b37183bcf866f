from __future__ import annotations

from pathlib import Path

from infrastructure.export.xml_file_writer import JobXmlFileWriter


def test_write_creates_directory_and_uses_job_name(tmp_path: Path) -> None:
    writer = JobXmlFileWriter(tmp_path / "out" / "jobs")

    path = writer.write("NIGHTLY_LOAD", "<job/>\n")

    assert path == tmp_path / "out" / "jobs" / "NIGHTLY_LOAD.xml"
    assert path.read_text(encoding="utf-8") == "<job/>\n"


def test_filename_falls_back_when_name_is_blank(tmp_path: Path) -> None:
    writer = JobXmlFileWriter(tmp_path)

    assert writer.filename_for("") == "batch-job.xml"
    assert writer.filename_for("   ") == "batch-job.xml"


def test_filename_replaces_unsafe_characters(tmp_path: Path) -> None:
    writer = JobXmlFileWriter(tmp_path)

    assert writer.filename_for("my job/v2") == "my_job_v2.xml"
    assert writer.filename_for("../etc") == "etc.xml"
