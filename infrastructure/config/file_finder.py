"""Find job configuration files by job name."""
from pathlib import Path
from typing import Optional


class JobConfigFileFinder:
    """Search job configuration files under the given base directory."""

    PRIORITY = [".json", ".yaml", ".yml"]

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_name(self, job_name: str) -> Optional[Path]:
        """
        Find a configuration file by job name.

        Args:
            job_name: Job name (e.g., "EDDLY_CUSTOMER_LOAD")

        Returns:
            The Path if found, otherwise None.
        """
        if not self.base_dir.is_dir():
            return None

        candidates: list[Path] = []
        for ext in self.PRIORITY:
            for file_path in self.base_dir.rglob(f"{job_name}{ext}"):
                if file_path.is_file():
                    candidates.append(file_path)

        if not candidates:
            return None

        # .json wins over the YAML variants for the same name
        candidates.sort(key=lambda path: (self.PRIORITY.index(path.suffix), str(path)))
        return candidates[0]
