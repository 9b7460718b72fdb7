"""Settings file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from monthgrid.domain import Settings


class SettingsLoadError(Exception):
    def __init__(self, path: Path, issues: list[dict[str, Any]]) -> None:
        super().__init__(f"Invalid settings file: {path}")
        self.path = path
        self.issues = issues


def load_settings(path: str | Path | None = None) -> Settings:
    if path is None:
        return Settings()
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsLoadError(
            source, [{"field": "file", "message": f"Cannot read file: {exc.strerror}"}]
        ) from exc
    try:
        return Settings.model_validate_json(raw)
    except ValidationError as exc:
        issues: list[dict[str, Any]] = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", []))
            issues.append(
                {
                    "field": field or "file",
                    "message": error.get("msg", "Unknown error"),
                }
            )
        raise SettingsLoadError(source, issues) from exc
