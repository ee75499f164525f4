"""Orchestration layer used by the CLI to run the decorator over a report."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence

from .adapters import InMemoryIssueSource, MeasureStore, ReportLoader, ReportLoaderError
from .debts import DebtClassificationTable
from .decorator import ToxicityChartDecorator
from .models import TOTAL_TOXICITY, Resource
from .normalization import NormalizedReport, ReportNormalizer
from .rules import ClassificationManifestManager, ManifestError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AnalysisResult:
    """Measures saved per resource plus run metadata."""

    project_key: str | None
    measures: Dict[str, Dict[str, float]]
    metadata: Mapping[str, Any]

    @property
    def project_measures(self) -> Dict[str, float]:
        if self.project_key is None:
            return {}
        return self.measures.get(self.project_key, {})

    @property
    def project_total(self) -> float:
        return self.project_measures.get(TOTAL_TOXICITY.key, 0.0)


ReportLoaderFactory = Callable[[Path], ReportLoader]


class ToxicityService:
    """High level service that decorates every resource of a findings report."""

    def __init__(
        self,
        *,
        report_loader_factory: ReportLoaderFactory | None = None,
        normalizer: ReportNormalizer | None = None,
        manifest_manager: ClassificationManifestManager | None = None,
        max_workers: int = 1,
    ) -> None:
        self._report_loader_factory = report_loader_factory or ReportLoader
        self._normalizer = normalizer or ReportNormalizer()
        self._manifest_manager = manifest_manager or ClassificationManifestManager()
        self._max_workers = max(1, max_workers)

    # ------------------------------------------------------------------
    def analyze(
        self,
        report_path: Path,
        *,
        manifests: Sequence[str | Path] | None = None,
    ) -> AnalysisResult:
        """Load ``report_path`` and decorate every resource it describes."""

        report = self._report_loader_factory(report_path).load_report()
        result = self.analyze_report(report, manifests=manifests)
        result.metadata = {"report": str(report_path), **result.metadata}
        return result

    # ------------------------------------------------------------------
    def analyze_report(
        self,
        report: Mapping[str, Any],
        *,
        manifests: Sequence[str | Path] | None = None,
    ) -> AnalysisResult:
        """Decorate the resources of an already loaded report."""

        normalized = self._normalizer.normalize(report)
        table = DebtClassificationTable.from_manifests(manifests, manager=self._manifest_manager)

        store = MeasureStore()
        decorator = ToxicityChartDecorator(
            InMemoryIssueSource(normalized.issues_by_component),
            table=table,
        )

        metadata: dict[str, Any] = {
            "resource_count": len(normalized.resources) + 1,
            "finding_count": normalized.finding_count,
            "classified_rules": len(table),
        }

        if not decorator.should_execute_on_project(normalized.project):
            logger.info("Skipping toxicity analysis: project has no key")
            return AnalysisResult(project_key=None, measures={}, metadata=metadata)

        self._decorate_children(decorator, store, normalized)
        decorator.decorate(normalized.project, store.context_for(normalized.project))

        return AnalysisResult(
            project_key=normalized.project.key,
            measures=store.measures(),
            metadata=metadata,
        )

    # ------------------------------------------------------------------
    def _decorate_children(
        self,
        decorator: ToxicityChartDecorator,
        store: MeasureStore,
        normalized: NormalizedReport,
    ) -> None:
        ordered = _leaves_first(normalized.resources)

        if self._max_workers == 1:
            for resource in ordered:
                decorator.decorate(resource, store.context_for(resource))
            return

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [
                pool.submit(decorator.decorate, resource, store.context_for(resource))
                for resource in ordered
            ]
            for future in futures:
                future.result()


def _leaves_first(resources: Sequence[Resource]) -> List[Resource]:
    parents = {resource.key: resource.parent_key for resource in resources}

    def depth(resource: Resource) -> int:
        level = 0
        seen: set[str | None] = set()
        current: str | None = resource.key
        while current in parents and current not in seen:
            seen.add(current)
            current = parents[current]
            level += 1
        return level

    return sorted(resources, key=depth, reverse=True)


__all__ = [
    "AnalysisResult",
    "ManifestError",
    "ReportLoaderError",
    "ToxicityService",
]
