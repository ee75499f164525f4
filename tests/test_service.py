from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from toxicity_chart.adapters import ReportLoaderError
from toxicity_chart.debts import (
    METHOD_LENGTH_CHECK_STYLE,
    MISSING_SWITCH_DEFAULT_CHECK_STYLE,
)
from toxicity_chart.decorator import MEASURE_COUNT
from toxicity_chart.models import DEBT_TYPE_METRICS, TOTAL_TOXICITY, TOXIC_RESOURCES, DebtType
from toxicity_chart.service import AnalysisResult, ToxicityService


def _report() -> dict[str, Any]:
    return {
        "project": {"key": "Java"},
        "resources": [
            {"key": "Java:src", "qualifier": "DIR"},
            {"key": "Java:src/Foo.java", "parent": "Java:src"},
            {"key": "Java:src/Bar.java", "parent": "Java:src"},
            {"key": "Java:src/Clean.java", "parent": "Java:src"},
        ],
        "issues": [
            *(
                {"rule": MISSING_SWITCH_DEFAULT_CHECK_STYLE, "component": "Java:src/Foo.java"}
                for _ in range(10)
            ),
            {
                "rule": METHOD_LENGTH_CHECK_STYLE,
                "component": "Java:src/Bar.java",
                "message": "Method length is 60 lines (max allowed is 30).",
            },
            {"rule": "pmd:UnusedPrivateField", "component": "Java:src/Bar.java"},
        ],
    }


class DummyReportLoader:
    def __init__(self, report_path: Path) -> None:
        self.report_path = report_path

    def load_report(self) -> dict[str, Any]:
        return _report()


@pytest.mark.parametrize("workers", [1, 4])
def test_service_decorates_every_resource(workers: int) -> None:
    service = ToxicityService(report_loader_factory=DummyReportLoader, max_workers=workers)

    result = service.analyze(Path("/workspace/report.json"))

    assert isinstance(result, AnalysisResult)
    assert result.project_key == "Java"
    assert set(result.measures) == {
        "Java",
        "Java:src",
        "Java:src/Foo.java",
        "Java:src/Bar.java",
        "Java:src/Clean.java",
    }
    assert all(len(values) == MEASURE_COUNT for values in result.measures.values())

    foo = result.measures["Java:src/Foo.java"]
    assert foo[DEBT_TYPE_METRICS[DebtType.MISSING_SWITCH_DEFAULT].key] == 10.0
    bar = result.measures["Java:src/Bar.java"]
    assert bar[DEBT_TYPE_METRICS[DebtType.METHOD_LENGTH].key] == pytest.approx(2.0)

    assert result.project_total == pytest.approx(12.0)
    assert result.project_measures[TOXIC_RESOURCES.key] == 2.0
    assert result.measures["Java:src/Clean.java"][TOTAL_TOXICITY.key] == 0.0
    assert result.metadata["report"] == "/workspace/report.json"
    assert result.metadata["finding_count"] == 12


def test_service_skips_project_without_key() -> None:
    result = ToxicityService().analyze_report({"project": {"name": "anonymous"}, "issues": []})

    assert result.project_key is None
    assert result.measures == {}
    assert result.project_total == 0.0


def test_service_applies_manifest_overrides(tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    override.write_text(
        "packs:\n"
        "  - name: checkstyle\n"
        "    rules:\n"
        "      com.puppycrawl.tools.checkstyle.checks.coding.MissingSwitchDefaultCheck:\n"
        "        cost: 0.5\n",
        encoding="utf-8",
    )

    result = ToxicityService().analyze_report(_report(), manifests=[override])

    assert result.project_total == pytest.approx(7.0)


def test_missing_report_raises(tmp_path: Path) -> None:
    with pytest.raises(ReportLoaderError):
        ToxicityService().analyze(tmp_path / "missing.json")


def test_findings_outside_the_resource_list_are_charged_to_the_project() -> None:
    report = {
        "project": {"key": "Java"},
        "resources": [{"key": "Java:src/Foo.java"}],
        "issues": [
            {"rule": MISSING_SWITCH_DEFAULT_CHECK_STYLE, "component": "Java"},
            {"rule": MISSING_SWITCH_DEFAULT_CHECK_STYLE},
            {"rule": MISSING_SWITCH_DEFAULT_CHECK_STYLE, "component": "Java:Unlisted.java"},
        ],
    }

    result = ToxicityService().analyze_report(report)

    assert result.metadata["finding_count"] == 3
    assert result.project_total == 3.0
    assert result.project_measures[TOXIC_RESOURCES.key] == 1.0
    assert result.measures["Java:src/Foo.java"][TOTAL_TOXICITY.key] == 0.0
    assert "Java:Unlisted.java" not in result.measures
