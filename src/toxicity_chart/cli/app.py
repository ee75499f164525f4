"""Command-line interface implementation for the toxicity chart tooling."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from ..adapters import ReportLoaderError
from ..debts import ClassificationError
from ..models import DEBT_TYPE_METRICS, METRICS, TOTAL_TOXICITY, TOXIC_RESOURCES
from ..rules import ManifestError
from ..service import AnalysisResult, ToxicityService

_CATEGORY_KEYS = {metric.key: debt_type for debt_type, metric in DEBT_TYPE_METRICS.items()}


@dataclass(slots=True)
class ToxicityReport:
    """Saved measures plus contextual metadata."""

    project_key: str | None
    measures: Mapping[str, Mapping[str, float]]
    metadata: Mapping[str, Any]

    @property
    def project_total(self) -> float:
        if self.project_key is None:
            return 0.0
        return self.measures.get(self.project_key, {}).get(TOTAL_TOXICITY.key, 0.0)

    def worst_category(self, resource_key: str) -> str | None:
        values = self.measures.get(resource_key, {})
        categories = [(values[key], _CATEGORY_KEYS[key].value) for key in _CATEGORY_KEYS if values.get(key)]
        if not categories:
            return None
        return max(categories)[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": dict(self.metadata),
            "summary": {
                "project": self.project_key,
                "total_toxicity": self.project_total,
            },
            "measures": {key: dict(values) for key, values in self.measures.items()},
        }


def render_table(report: ToxicityReport) -> str:
    """Render per-resource toxicity as a simple text table for terminal output."""

    if not report.measures:
        return "No measures saved."

    headers = ("Resource", "Toxicity", "Toxic", "Worst category")
    rows = [headers]
    ordered = sorted(
        report.measures.items(),
        key=lambda item: (item[0] != report.project_key, -item[1].get(TOTAL_TOXICITY.key, 0.0), item[0]),
    )
    for resource_key, values in ordered:
        rows.append(
            (
                resource_key,
                f"{values.get(TOTAL_TOXICITY.key, 0.0):.2f}",
                str(int(values.get(TOXIC_RESOURCES.key, 0.0))),
                report.worst_category(resource_key) or "-",
            )
        )

    widths = [max(len(str(row[idx])) for row in rows) for idx in range(len(headers))]

    def format_row(values: tuple[str, str, str, str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths, strict=True))

    lines = [format_row(headers)]
    lines.append("  ".join("=" * width for width in widths))
    for row in rows[1:]:
        lines.append(format_row(row))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(prog="toxicity-chart", description="Toxicity chart CLI")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Classify the findings of a report and print toxicity measures."
    )
    analyze_parser.add_argument(
        "report",
        type=Path,
        help="Path to a findings report (JSON, or YAML for any other extension).",
    )
    analyze_parser.add_argument(
        "--rule-manifest",
        dest="rule_manifests",
        action="append",
        default=None,
        type=str,
        help="Path to a classification manifest YAML file overriding the defaults.",
    )
    analyze_parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of threads used to decorate resources below the project root.",
    )
    analyze_parser.add_argument(
        "--fail-above",
        type=float,
        default=None,
        help="Fail the run when the project toxicity is above the provided value.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format for analysis results.",
    )

    subparsers.add_parser("metrics", help="List the metrics saved by the decorator.")

    return parser


def create_service(*, max_workers: int = 1) -> ToxicityService:
    """Create a toxicity service using the packaged classification manifest."""

    return ToxicityService(max_workers=max_workers)


def _build_report(result: AnalysisResult) -> ToxicityReport:
    return ToxicityReport(
        project_key=result.project_key,
        measures=result.measures,
        metadata=result.metadata,
    )


def _format_report(
    report: ToxicityReport,
    *,
    fail_above: float | None,
    output_format: str,
) -> tuple[str, bool]:
    if output_format not in {"table", "json"}:
        raise ValueError("format must be either 'table' or 'json'")

    should_fail = fail_above is not None and report.project_total > fail_above

    if output_format == "json":
        output = json.dumps(report.to_dict(), indent=2)
    else:
        output = render_table(report)

    return output, should_fail


def _handle_analyze(args: argparse.Namespace) -> int:
    if args.workers < 1:
        print("Error: --workers must be at least 1")
        return 2

    service = create_service(max_workers=args.workers)

    try:
        result = service.analyze(
            args.report.resolve(),
            manifests=list(args.rule_manifests or []),
        )
    except (ReportLoaderError, ManifestError, ClassificationError) as exc:
        print(f"Error: {exc}")
        return 2

    report = _build_report(result)
    output, should_fail = _format_report(
        report,
        fail_above=args.fail_above,
        output_format=args.format,
    )

    print(output)
    return 1 if should_fail else 0


def _handle_metrics() -> int:
    for metric in METRICS:
        print(f"{metric.key}\t{metric.name}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "analyze":
        return _handle_analyze(args)
    if args.command == "metrics":
        return _handle_metrics()

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
