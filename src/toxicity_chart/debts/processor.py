"""Turn individual findings into debt contributions."""

from __future__ import annotations

import logging
import re
from typing import Optional, Pattern, Sequence, Tuple

from ..models import ClassificationEntry, CostMode, DebtContribution, Finding
from .classification import DebtClassificationTable

logger = logging.getLogger(__name__)

# Checkstyle reports measured values before their limits, except for
# ParameterNumberCheck which states the limit first.
_THRESHOLD_PATTERNS: Sequence[Pattern[str]] = (
    re.compile(r"\bis (?P<value>\d[\d,]*)\b.*?\bmax allowed is (?P<limit>\d[\d,]*)", re.IGNORECASE),
    re.compile(r"\bmore than (?P<limit>\d[\d,]*) parameters \(found (?P<value>\d[\d,]*)\)", re.IGNORECASE),
)


def parse_threshold(message: str) -> Optional[Tuple[float, float]]:
    """Return ``(measured, allowed)`` parsed from a threshold message."""

    for pattern in _THRESHOLD_PATTERNS:
        match = pattern.search(message or "")
        if match is None:
            continue
        value = float(match.group("value").replace(",", ""))
        limit = float(match.group("limit").replace(",", ""))
        return value, limit
    return None


class DebtProcessor:
    """Classify findings against a shared :class:`DebtClassificationTable`."""

    def __init__(self, table: DebtClassificationTable) -> None:
        self.table = table

    def process(self, finding: Finding) -> Optional[DebtContribution]:
        """Return the finding's debt contribution, or ``None`` when it is not debt."""

        entry = self.table.classify(finding.rule_key)
        if entry is None:
            return None

        return DebtContribution(debt_type=entry.debt_type, amount=self._cost(entry, finding))

    # ------------------------------------------------------------------
    def _cost(self, entry: ClassificationEntry, finding: Finding) -> float:
        if entry.mode is CostMode.FIXED:
            return entry.cost

        parsed = parse_threshold(finding.message)
        if parsed is None:
            logger.debug(
                "No threshold in message for %s, charging unit cost: %r",
                finding.rule_key,
                finding.message,
            )
            return entry.cost

        value, limit = parsed
        if limit <= 0:
            logger.debug("Zero threshold for %s, charging unit cost", finding.rule_key)
            return entry.cost

        return entry.cost * value / limit
