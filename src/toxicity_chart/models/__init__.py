"""Data models for findings, resources, debt totals and measures."""

from .debt import ClassificationEntry, CostMode, DebtContribution, DebtType, ResourceDebtTotals
from .finding import Finding, rule_key_of
from .measure import DEBT_TYPE_METRICS, METRICS, TOTAL_TOXICITY, TOXIC_RESOURCES, Measure, Metric
from .resource import Resource, ResourceQualifier

__all__ = [
    "ClassificationEntry",
    "CostMode",
    "DEBT_TYPE_METRICS",
    "DebtContribution",
    "DebtType",
    "Finding",
    "METRICS",
    "Measure",
    "Metric",
    "Resource",
    "ResourceDebtTotals",
    "ResourceQualifier",
    "TOTAL_TOXICITY",
    "TOXIC_RESOURCES",
    "rule_key_of",
]
