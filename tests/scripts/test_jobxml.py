from __future__ import annotations

import sys
from pathlib import Path

import pytest

from scripts import jobxml

JOB_YAML = """
name: CLI_JOB
steps:
  - type: batchlet
    name: step_one
    batchlet_class: com.example.MyBatchlet
    transitions:
      - on: COMPLETED
        action: end
"""

VALID_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<job id="J" xmlns="http://xmlns.jcp.org/xml/ns/javaee" version="1.0">\n'
    '  <step id="s1">\n'
    '    <batchlet ref="com.example.Task"/>\n'
    "  </step>\n"
    "</job>\n"
)


def _run(monkeypatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["jobxml.py", *args])
    with pytest.raises(SystemExit) as excinfo:
        jobxml.main()
    return excinfo.value.code


def test_generate_saves_document(monkeypatch, capsys, tmp_path: Path) -> None:
    # Arrange
    config_file = tmp_path / "cli_job.yaml"
    config_file.write_text(JOB_YAML, encoding="utf-8")
    output_dir = tmp_path / "out"

    # Act
    code = _run(monkeypatch, "generate", "--config-file", str(config_file), "--output-dir", str(output_dir))

    # Assert
    captured = capsys.readouterr()
    assert code == 0
    assert "Job: CLI_JOB" in captured.out
    assert f"Saved: {output_dir / 'CLI_JOB.xml'}" in captured.out
    assert "✅ XML is valid JSR-352 format" in captured.out
    saved = (output_dir / "CLI_JOB.xml").read_text(encoding="utf-8")
    assert '<end on="COMPLETED"/>' in saved


def test_config_path_alone_means_generate(monkeypatch, capsys, tmp_path: Path) -> None:
    config_file = tmp_path / "cli_job.yaml"
    config_file.write_text(JOB_YAML, encoding="utf-8")

    code = _run(monkeypatch, str(config_file), "--stdout")

    captured = capsys.readouterr()
    assert code == 0
    assert '<job id="CLI_JOB"' in captured.out
    assert "Saved:" not in captured.out


def test_generate_by_job_name(monkeypatch, capsys, tmp_path: Path) -> None:
    config_dir = tmp_path / "configs"
    config_dir.mkdir()
    (config_dir / "CLI_JOB.yaml").write_text(JOB_YAML, encoding="utf-8")
    monkeypatch.setattr(
        jobxml,
        "SETTINGS",
        jobxml.AppSettings(config_dir=config_dir, output_dir=tmp_path / "out"),
    )

    code = _run(monkeypatch, "generate", "--job-name", "CLI_JOB")

    assert code == 0
    assert (tmp_path / "out" / "CLI_JOB.xml").exists()


def test_generate_unknown_job_name(monkeypatch, capsys, tmp_path: Path) -> None:
    monkeypatch.setattr(
        jobxml,
        "SETTINGS",
        jobxml.AppSettings(config_dir=tmp_path, output_dir=tmp_path / "out"),
    )

    code = _run(monkeypatch, "generate", "--job-name", "NOPE")

    assert code == 1
    assert "ERROR: Job configuration not found: NOPE" in capsys.readouterr().out


def test_validate_local_file(monkeypatch, capsys, tmp_path: Path) -> None:
    xml_file = tmp_path / "job.xml"
    xml_file.write_text(VALID_XML.replace("com.example.Task", "Task"), encoding="utf-8")

    code = _run(monkeypatch, "validate", "--xml-file", str(xml_file))

    captured = capsys.readouterr()
    assert code == 1
    assert "❌ XML validation failed" in captured.out
    assert 'Invalid Java class name: "Task"' in captured.out


def test_validate_through_api(monkeypatch, capsys, tmp_path: Path) -> None:
    # Arrange
    captured = {}
    xml_file = tmp_path / "job.xml"
    xml_file.write_text(VALID_XML, encoding="utf-8")

    class DummyResponse:
        status_code = 200

        def json(self):
            return {"valid": True, "errors": [], "warnings": []}

    def fake_post(url, json, timeout):
        captured["url"] = url
        captured["json"] = json
        captured["timeout"] = timeout
        return DummyResponse()

    monkeypatch.setattr(jobxml.requests, "post", fake_post)

    # Act
    code = _run(monkeypatch, "validate", "--xml-file", str(xml_file), "--api-base-url", "http://localhost:8000/")

    # Assert
    assert code == 0
    assert captured["url"] == "http://localhost:8000/validations"
    assert captured["json"] == {"xml": VALID_XML}
    assert captured["timeout"] == jobxml.DEFAULT_API_TIMEOUT_SEC
    assert "Status: 200" in capsys.readouterr().out


def test_report_prints_warnings(monkeypatch, capsys, tmp_path: Path) -> None:
    xml_file = tmp_path / "job.xml"
    xml_file.write_text(VALID_XML, encoding="utf-8")

    code = _run(monkeypatch, "report", "--xml-file", str(xml_file))

    captured = capsys.readouterr()
    assert code == 0
    assert "⚠️ WARNINGS:" in captured.out


def test_missing_xml_file(monkeypatch, capsys, tmp_path: Path) -> None:
    code = _run(monkeypatch, "report", "--xml-file", str(tmp_path / "missing.xml"))

    assert code == 1
    assert "ERROR: Unable to read XML file" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch, capsys) -> None:
    code = _run(monkeypatch)

    assert code == 1
    assert "usage:" in capsys.readouterr().out
