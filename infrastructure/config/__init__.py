# infrastructure/config/__init__.py
from infrastructure.config.base_loader import JobConfigLoaderBase
from infrastructure.config.errors import ConfigLoadError
from infrastructure.config.file_finder import JobConfigFileFinder
from infrastructure.config.json_loader import JsonJobConfigLoader
from infrastructure.config.loader_registry import JobConfigLoaderRegistry
from infrastructure.config.yaml_loader import YamlJobConfigLoader

__all__ = [
    "ConfigLoadError",
    "JobConfigLoaderBase",
    "JobConfigLoaderRegistry",
    "JobConfigFileFinder",
    "YamlJobConfigLoader",
    "JsonJobConfigLoader",
]
