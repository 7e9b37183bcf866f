# infrastructure/config/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.config.base_loader import JobConfigLoaderBase
from infrastructure.config.errors import ConfigLoadError


class JsonJobConfigLoader(JobConfigLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as exc:
                raise ConfigLoadError(f"Invalid JSON in {path}: {exc}") from exc
