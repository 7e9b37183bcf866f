from __future__ import annotations

from pathlib import Path

from infrastructure.config.file_finder import JobConfigFileFinder


def test_file_finder_prefers_json(tmp_path: Path) -> None:
    base_dir = tmp_path / "configs"
    base_dir.mkdir()
    (base_dir / "sample.yaml").write_text("name: sample", encoding="utf-8")
    (base_dir / "sample.json").write_text("{}", encoding="utf-8")

    finder = JobConfigFileFinder(base_dir)

    found = finder.find_by_name("sample")

    assert found is not None
    assert found.suffix == ".json"


def test_file_finder_uses_yaml_when_no_json(tmp_path: Path) -> None:
    base_dir = tmp_path / "configs"
    base_dir.mkdir()
    (base_dir / "sample.yaml").write_text("name: sample", encoding="utf-8")

    finder = JobConfigFileFinder(base_dir)

    found = finder.find_by_name("sample")

    assert found is not None
    assert found.suffix == ".yaml"


def test_file_finder_searches_nested_directories(tmp_path: Path) -> None:
    base_dir = tmp_path / "configs"
    nested_dir = base_dir / "nightly"
    nested_dir.mkdir(parents=True)
    config_path = nested_dir / "sample.yml"
    config_path.write_text("name: sample", encoding="utf-8")

    finder = JobConfigFileFinder(base_dir)

    assert finder.find_by_name("sample") == config_path


def test_file_finder_returns_none_when_missing(tmp_path: Path) -> None:
    assert JobConfigFileFinder(tmp_path / "nowhere").find_by_name("sample") is None
    assert JobConfigFileFinder(tmp_path).find_by_name("sample") is None
