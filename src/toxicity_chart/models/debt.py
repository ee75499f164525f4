"""Debt categories, classification entries and per-resource totals."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping


class DebtType(str, Enum):
    """Closed set of toxicity categories a finding can be charged to."""

    ANON_INNER_LENGTH = "anon_inner_length"
    BOOLEAN_EXPRESSION_COMPLEXITY = "boolean_expression_complexity"
    CLASS_DATA_ABSTRACTION_COUPLING = "class_data_abstraction_coupling"
    CLASS_FAN_OUT_COMPLEXITY = "class_fan_out_complexity"
    CYCLOMATIC_COMPLEXITY = "cyclomatic_complexity"
    FILE_LENGTH = "file_length"
    METHOD_LENGTH = "method_length"
    MISSING_SWITCH_DEFAULT = "missing_switch_default"
    NESTED_IF_DEPTH = "nested_if_depth"
    NESTED_TRY_DEPTH = "nested_try_depth"
    PARAMETER_NUMBER = "parameter_number"


class CostMode(str, Enum):
    """How a classified finding turns into a debt amount."""

    FIXED = "fixed"
    THRESHOLD = "threshold"


@dataclass(frozen=True, slots=True)
class ClassificationEntry:
    """Maps one rule key onto a debt category and its unit cost."""

    rule_key: str
    debt_type: DebtType
    cost: float = 1.0
    mode: CostMode = CostMode.FIXED


@dataclass(frozen=True, slots=True)
class DebtContribution:
    """Debt charged to a category by a single finding."""

    debt_type: DebtType
    amount: float


def _zeroed() -> Dict[DebtType, float]:
    return {debt_type: 0.0 for debt_type in DebtType}


@dataclass(slots=True)
class ResourceDebtTotals:
    """Accumulated debt for one resource (or the project aggregate).

    Every :class:`DebtType` is always present in ``by_type``. ``toxic_resources``
    counts the resources with a non-zero total that were folded into these
    totals.
    """

    by_type: Dict[DebtType, float] = field(default_factory=_zeroed)
    total: float = 0.0
    toxic_resources: int = 0

    def add(self, contribution: DebtContribution) -> None:
        self.by_type[contribution.debt_type] += contribution.amount
        self.total += contribution.amount

    def merge(self, other: "ResourceDebtTotals") -> None:
        """Fold ``other`` into these totals."""

        for debt_type, amount in other.by_type.items():
            self.by_type[debt_type] = self.by_type.get(debt_type, 0.0) + amount
        self.total += other.total
        self.toxic_resources += other.toxic_resources

    def get(self, debt_type: DebtType) -> float:
        return self.by_type.get(debt_type, 0.0)

    @classmethod
    def combine(cls, totals: Iterable["ResourceDebtTotals"]) -> "ResourceDebtTotals":
        combined = cls()
        for item in totals:
            combined.merge(item)
        return combined

    def as_mapping(self) -> Mapping[str, float]:
        return {debt_type.value: amount for debt_type, amount in self.by_type.items()}
