"""Decorator invoked by the analysis host once per resource."""

from __future__ import annotations

import logging
import threading

from ..adapters import DecoratorContext, IssueSource
from ..debts import DebtClassificationTable, DebtProcessor, ResourceDebtAccumulator
from ..models import (
    DEBT_TYPE_METRICS,
    TOTAL_TOXICITY,
    TOXIC_RESOURCES,
    DebtType,
    Measure,
    Resource,
    ResourceDebtTotals,
)
from .visitation import ResourceVisitationTracker

logger = logging.getLogger(__name__)

MEASURE_COUNT = len(DebtType) + 2


class ToxicityChartDecorator:
    """Classify a resource's findings and save its toxicity measures.

    Resources below the project root are charged with their own findings. The
    project root carries the sum over the whole run, so each finding is counted
    once at its resource and once in the project aggregate.
    """

    def __init__(
        self,
        issue_source: IssueSource,
        *,
        table: DebtClassificationTable | None = None,
        tracker: ResourceVisitationTracker | None = None,
    ) -> None:
        self.issue_source = issue_source
        self.table = table if table is not None else DebtClassificationTable.from_manifests()
        self.tracker = tracker or ResourceVisitationTracker()
        self._accumulator = ResourceDebtAccumulator(DebtProcessor(self.table))
        self._project_totals = ResourceDebtTotals()
        self._totals_lock = threading.Lock()
        self._root_context: DecoratorContext | None = None

    # ------------------------------------------------------------------
    def should_execute_on_project(self, project: Resource) -> bool:
        """Gate the decorator for the run on the project having a key."""

        return self.tracker.should_process_project(project)

    # ------------------------------------------------------------------
    def all_resources_are_processed(self, resource: Resource) -> bool:
        """Return ``True`` when ``resource`` is the project root of the run."""

        return self.tracker.already_processed(resource)

    # ------------------------------------------------------------------
    def decorate(self, resource: Resource, context: DecoratorContext) -> None:
        """Accumulate and save the toxicity measures of ``resource``.

        The project root is charged with its own findings plus those of every
        resource decorated in the run. A resource finishing after the root was
        saved causes the root's measures to be saved again.
        """

        if not self.tracker.enabled:
            return

        if not self.tracker.mark_visited(resource):
            logger.debug("Resource %s already decorated, skipping", resource.identity)
            return

        is_root = self.all_resources_are_processed(resource)
        findings = self.issue_source.fetch_issues(resource)
        totals = self._accumulator.accumulate(findings)

        if not is_root:
            self.save_measures(context, totals)

        with self._totals_lock:
            self._project_totals.merge(totals)
            if is_root:
                self._root_context = context
            elif self._root_context is None:
                return
            else:
                logger.warning(
                    "Resource %s decorated after the project root; saving project measures again",
                    resource.identity,
                )
            self.save_measures(self._root_context, ResourceDebtTotals.combine([self._project_totals]))

    # ------------------------------------------------------------------
    def save_measures(self, context: DecoratorContext, totals: ResourceDebtTotals | None = None) -> None:
        """Save one measure per debt type plus the total and toxic-resource count."""

        totals = totals if totals is not None else ResourceDebtTotals()
        for debt_type in DebtType:
            context.save_measure(Measure(DEBT_TYPE_METRICS[debt_type], totals.get(debt_type)))
        context.save_measure(Measure(TOTAL_TOXICITY, totals.total))
        context.save_measure(Measure(TOXIC_RESOURCES, float(totals.toxic_resources)))
        logger.debug("Saved %d toxicity measures (total %.2f)", MEASURE_COUNT, totals.total)

    # ------------------------------------------------------------------
    def project_totals(self) -> ResourceDebtTotals:
        """Return a copy of the totals accumulated so far in this run."""

        with self._totals_lock:
            return ResourceDebtTotals.combine([self._project_totals])
