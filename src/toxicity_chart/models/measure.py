"""Metric definitions and measures saved into the host's measure store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .debt import DebtType

METRIC_PREFIX = "toxicity_"


@dataclass(frozen=True, slots=True)
class Metric:
    """A named numeric measure the decorator publishes."""

    key: str
    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class Measure:
    """A value recorded against a metric for the resource being decorated."""

    metric: Metric
    value: float

    @property
    def metric_key(self) -> str:
        return self.metric.key


def _debt_type_metric(debt_type: DebtType) -> Metric:
    label = debt_type.value.replace("_", " ").title()
    return Metric(
        key=f"{METRIC_PREFIX}{debt_type.value}",
        name=f"Toxicity: {label}",
        description=f"Toxicity debt charged to {label.lower()} findings.",
    )


DEBT_TYPE_METRICS: Dict[DebtType, Metric] = {
    debt_type: _debt_type_metric(debt_type) for debt_type in DebtType
}

TOTAL_TOXICITY = Metric(
    key=f"{METRIC_PREFIX}total",
    name="Toxicity",
    description="Sum of the toxicity debt across every category.",
)

TOXIC_RESOURCES = Metric(
    key="toxic_resources",
    name="Toxic resources",
    description="Number of resources carrying a non-zero toxicity debt.",
)

METRICS: List[Metric] = [*DEBT_TYPE_METRICS.values(), TOTAL_TOXICITY, TOXIC_RESOURCES]
