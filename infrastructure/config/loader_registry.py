# infrastructure/config/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.config.base_loader import JobConfigLoaderBase
from infrastructure.config.errors import ConfigLoadError
from infrastructure.config.json_loader import JsonJobConfigLoader
from infrastructure.config.yaml_loader import YamlJobConfigLoader


class JobConfigLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, JobConfigLoaderBase] = {
            ".yaml": YamlJobConfigLoader(),
            ".yml": YamlJobConfigLoader(),
            ".json": JsonJobConfigLoader(),
        }

    def get_loader(self, path: Path) -> JobConfigLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ConfigLoadError(f"Unsupported job configuration format: {ext}")
        return loader
