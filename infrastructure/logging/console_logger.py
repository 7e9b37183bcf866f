# infrastructure/logging/console_logger.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """Prints `<event> <json payload>` lines to stdout."""
    bound: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(bound=merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit(event, "debug", fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit(event, "info", fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit(event, "warning", fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit(event, "error", fields)

    def _emit(self, event: str, level: str, fields: Dict[str, Any]) -> None:
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        payload.setdefault("level", level)
        print(f"{event} {json.dumps(payload, ensure_ascii=False, default=str)}")
