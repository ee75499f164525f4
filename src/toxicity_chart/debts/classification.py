"""Immutable rule-key to debt-type lookup table."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence

from ..models import ClassificationEntry, rule_key_of
from ..rules import ClassificationManifestManager

CHECKSTYLE_REPOSITORY = "checkstyle"
CHECKSTYLE_CHECKS = "com.puppycrawl.tools.checkstyle.checks"

MISSING_SWITCH_DEFAULT_CHECK_STYLE = rule_key_of(
    CHECKSTYLE_REPOSITORY, f"{CHECKSTYLE_CHECKS}.coding.MissingSwitchDefaultCheck"
)
METHOD_LENGTH_CHECK_STYLE = rule_key_of(
    CHECKSTYLE_REPOSITORY, f"{CHECKSTYLE_CHECKS}.sizes.MethodLengthCheck"
)
PARAMETER_NUMBER_CHECK_STYLE = rule_key_of(
    CHECKSTYLE_REPOSITORY, f"{CHECKSTYLE_CHECKS}.sizes.ParameterNumberCheck"
)
CYCLOMATIC_COMPLEXITY_CHECK_STYLE = rule_key_of(
    CHECKSTYLE_REPOSITORY, f"{CHECKSTYLE_CHECKS}.metrics.CyclomaticComplexityCheck"
)


class ClassificationError(RuntimeError):
    """Raised when a classification table would be ambiguous."""


class DebtClassificationTable:
    """Read-only mapping from full rule keys to classification entries.

    The table is built once and shared between decorations; it is never
    mutated after construction so concurrent lookups need no locking.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[ClassificationEntry]) -> None:
        table: dict[str, ClassificationEntry] = {}
        for entry in entries:
            if entry.rule_key in table:
                raise ClassificationError(f"Duplicate classification for rule key: {entry.rule_key}")
            table[entry.rule_key] = entry
        self._entries: Mapping[str, ClassificationEntry] = MappingProxyType(table)

    @classmethod
    def from_manifests(
        cls,
        manifests: Sequence[Path | str] | None = None,
        *,
        manager: ClassificationManifestManager | None = None,
    ) -> "DebtClassificationTable":
        """Build a table from the packaged manifest plus optional overrides."""

        manager = manager or ClassificationManifestManager()
        return cls(manager.entries(manifests))

    def classify(self, rule_key: str) -> Optional[ClassificationEntry]:
        """Return the entry for ``rule_key`` or ``None`` when it is not debt."""

        return self._entries.get(rule_key)

    def __contains__(self, rule_key: object) -> bool:
        return rule_key in self._entries

    def __iter__(self) -> Iterator[ClassificationEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
