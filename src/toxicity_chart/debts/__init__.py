"""Debt classification, processing and accumulation."""

from .accumulator import ResourceDebtAccumulator
from .classification import (
    CHECKSTYLE_REPOSITORY,
    CYCLOMATIC_COMPLEXITY_CHECK_STYLE,
    METHOD_LENGTH_CHECK_STYLE,
    MISSING_SWITCH_DEFAULT_CHECK_STYLE,
    PARAMETER_NUMBER_CHECK_STYLE,
    ClassificationError,
    DebtClassificationTable,
)
from .processor import DebtProcessor, parse_threshold

__all__ = [
    "CHECKSTYLE_REPOSITORY",
    "CYCLOMATIC_COMPLEXITY_CHECK_STYLE",
    "ClassificationError",
    "DebtClassificationTable",
    "DebtProcessor",
    "METHOD_LENGTH_CHECK_STYLE",
    "MISSING_SWITCH_DEFAULT_CHECK_STYLE",
    "PARAMETER_NUMBER_CHECK_STYLE",
    "ResourceDebtAccumulator",
    "parse_threshold",
]
