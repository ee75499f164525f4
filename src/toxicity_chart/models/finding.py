"""Finding models handed to the decorator by the analysis host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

RULE_KEY_SEPARATOR = ":"


def rule_key_of(repository: str, rule: str) -> str:
    """Build the full ``repository:rule`` key used for classification lookups."""

    return f"{repository}{RULE_KEY_SEPARATOR}{rule}"


@dataclass(frozen=True, slots=True)
class Finding:
    """A single static-analysis issue attached to a resource."""

    rule_key: str
    component_key: str = ""
    message: str = ""
    line: Optional[int] = None
    severity: Optional[str] = None

    @property
    def repository(self) -> str:
        repository, separator, _ = self.rule_key.partition(RULE_KEY_SEPARATOR)
        return repository if separator else ""

    @property
    def rule(self) -> str:
        _, separator, rule = self.rule_key.partition(RULE_KEY_SEPARATOR)
        return rule if separator else self.rule_key
