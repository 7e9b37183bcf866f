# infrastructure/config/yaml_loader.py
"""
Load job configurations written in YAML
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.base_loader import JobConfigLoaderBase
from infrastructure.config.errors import ConfigLoadError


class YamlJobConfigLoader(JobConfigLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigLoadError(f"Invalid YAML in {path}: {exc}") from exc
