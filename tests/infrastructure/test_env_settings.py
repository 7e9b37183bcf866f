from __future__ import annotations

from pathlib import Path

from infrastructure.settings.env_settings import AppSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def test_defaults_resolve_against_project_root() -> None:
    settings = AppSettings.from_env({})

    assert settings.config_dir.resolve() == PROJECT_ROOT / "configs"
    assert settings.output_dir.resolve() == PROJECT_ROOT / "out"
    assert settings.log_level == "INFO"


def test_values_from_environment(tmp_path: Path) -> None:
    settings = AppSettings.from_env(
        {
            "JOBXML_CONFIG_DIR": str(tmp_path / "configs"),
            "JOBXML_OUTPUT_DIR": "build/xml",
            "JOBXML_LOG_LEVEL": "debug",
        }
    )

    assert settings.config_dir == tmp_path / "configs"
    assert settings.output_dir.resolve() == PROJECT_ROOT / "build" / "xml"
    assert settings.log_level == "DEBUG"
