"""Toxicity chart: classify analysis findings into debt categories and save measures."""

from .debts import DebtClassificationTable, DebtProcessor, ResourceDebtAccumulator
from .decorator import ResourceVisitationTracker, ToxicityChartDecorator
from .models import DebtType, Finding, Measure, Resource, ResourceDebtTotals

__all__ = [
    "DebtClassificationTable",
    "DebtProcessor",
    "DebtType",
    "Finding",
    "Measure",
    "Resource",
    "ResourceDebtAccumulator",
    "ResourceDebtTotals",
    "ResourceVisitationTracker",
    "ToxicityChartDecorator",
]
