"""Fold a resource's findings into per-category debt totals."""

from __future__ import annotations

from typing import Iterable

from ..models import Finding, ResourceDebtTotals
from .processor import DebtProcessor


class ResourceDebtAccumulator:
    """Accumulate debt contributions for the findings of one resource."""

    def __init__(self, processor: DebtProcessor) -> None:
        self.processor = processor

    def accumulate(self, findings: Iterable[Finding]) -> ResourceDebtTotals:
        """Return fresh totals for ``findings``; unclassified findings are ignored."""

        totals = ResourceDebtTotals()
        for finding in findings:
            contribution = self.processor.process(finding)
            if contribution is not None:
                totals.add(contribution)

        if totals.total > 0:
            totals.toxic_resources = 1
        return totals
