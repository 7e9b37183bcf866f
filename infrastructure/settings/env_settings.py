# infrastructure/settings/env_settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).parent.parent.parent
_env_path = _PROJECT_ROOT / ".env"


@dataclass(frozen=True)
class AppSettings:
    """
    Runtime settings for the API and scripts.

    JOBXML_CONFIG_DIR   directory searched for stored job configurations
    JOBXML_OUTPUT_DIR   directory receiving generated XML files
    JOBXML_LOG_LEVEL    loguru level
    """
    config_dir: Path
    output_dir: Path
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        if environ is None:
            # values already present in the process environment win over .env
            if _env_path.exists():
                load_dotenv(_env_path, override=False)
            environ = os.environ
        return cls(
            config_dir=_resolve_dir(environ.get("JOBXML_CONFIG_DIR", "configs")),
            output_dir=_resolve_dir(environ.get("JOBXML_OUTPUT_DIR", "out")),
            log_level=environ.get("JOBXML_LOG_LEVEL", "INFO").upper(),
        )


def _resolve_dir(raw: str) -> Path:
    path = Path(raw)
    if not path.is_absolute():
        path = _PROJECT_ROOT / path
    return path
