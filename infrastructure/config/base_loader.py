# infrastructure/config/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from domain.job import JobConfiguration
from infrastructure.config.errors import ConfigLoadError
from infrastructure.config.job_config_mapper import JobConfigMapper


class JobConfigLoaderBase(ABC):
    def __init__(self, mapper: JobConfigMapper | None = None) -> None:
        self._mapper = mapper or JobConfigMapper()

    def load_from_file(self, path: Union[str, Path]) -> JobConfiguration:
        p = Path(path)
        if not p.exists():
            raise ConfigLoadError(f"Job configuration file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise ConfigLoadError(f"Job configuration file is empty: {path}")

        if not isinstance(data, dict):
            raise ConfigLoadError(f"Job configuration file is invalid: {path}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> JobConfiguration:
        return self._mapper.to_job(data)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
