from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

import yaml


class ReportLoaderError(RuntimeError):
    """Exception raised when a findings report cannot be ingested."""


class ReportLoader:
    """Load a findings report exported by the analysis host.

    Files ending in ``.json`` are parsed as JSON; anything else is read as YAML.
    """

    def __init__(self, report_path: str | os.PathLike[str]) -> None:
        self.report_path = Path(report_path).resolve()

    def load_report(self) -> Mapping[str, Any]:
        """Return the raw report mapping."""

        path = self.report_path
        if not path.exists():
            raise ReportLoaderError(f"Findings report not found: {path}")

        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() == ".json":
                try:
                    data = json.load(handle)
                except json.JSONDecodeError as exc:
                    raise ReportLoaderError(f"Invalid JSON in findings report: {path}") from exc
            else:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ReportLoaderError(f"Invalid YAML in findings report: {path}") from exc

        if not isinstance(data, Mapping):
            raise ReportLoaderError(f"Findings report must be a mapping: {path}")

        return data


__all__ = ["ReportLoader", "ReportLoaderError"]
