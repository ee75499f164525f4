"""Utilities for loading and merging toxicity classification manifests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Sequence

import yaml

from ..models import ClassificationEntry, CostMode, DebtType, rule_key_of

logger = logging.getLogger(__name__)


class ManifestError(RuntimeError):
    """Raised when classification manifests cannot be loaded or parsed."""


@dataclass(slots=True)
class RuleClassification:
    """Manifest settings for a single rule of a pack."""

    rule: str
    debt_type: DebtType | None = None
    cost: float = 1.0
    mode: CostMode = CostMode.FIXED
    enabled: bool = True


@dataclass(slots=True)
class ClassificationPack:
    """A named group of rule classifications sharing a rule repository."""

    name: str
    repository: str = ""
    enabled: bool = True
    rules: Dict[str, RuleClassification] = field(default_factory=dict)

    def entries(self) -> List[ClassificationEntry]:
        """Return classification entries for the enabled, fully typed rules."""

        entries: List[ClassificationEntry] = []
        for rule in self.rules.values():
            if not rule.enabled or rule.debt_type is None:
                continue
            key = rule_key_of(self.repository, rule.rule) if self.repository else rule.rule
            entries.append(
                ClassificationEntry(
                    rule_key=key,
                    debt_type=rule.debt_type,
                    cost=rule.cost,
                    mode=rule.mode,
                )
            )
        return entries


_DEFAULT_MANIFEST = Path(__file__).resolve().parent / "manifests" / "checkstyle.yaml"


class ClassificationManifestManager:
    """Load classification manifests and expose the enabled packs."""

    def __init__(self, default_manifests: Sequence[Path | str] | None = None) -> None:
        manifest_paths: List[Path]
        if default_manifests is None:
            manifest_paths = []
            if _DEFAULT_MANIFEST.exists():
                manifest_paths.append(_DEFAULT_MANIFEST)
        else:
            manifest_paths = [Path(path) for path in default_manifests]

        self._default_manifests = manifest_paths

    # ------------------------------------------------------------------
    def load(self, manifests: Sequence[Path | str] | None = None) -> List[ClassificationPack]:
        """Return all packs defined by the default and supplied manifests."""

        manifest_paths = list(self._default_manifests)
        if manifests:
            manifest_paths.extend(Path(path) for path in manifests)

        packs: MutableMapping[str, ClassificationPack] = {}
        for manifest_path in manifest_paths:
            data = self._load_manifest(manifest_path)
            for pack_config in data.get("packs", []) or []:
                if not isinstance(pack_config, Mapping):
                    continue
                name = pack_config.get("name")
                if not name:
                    continue

                pack = packs.get(name, ClassificationPack(name=name))
                if "enabled" in pack_config:
                    pack.enabled = bool(pack_config["enabled"])
                if pack_config.get("repository"):
                    pack.repository = str(pack_config["repository"]).strip()

                rules = pack_config.get("rules")
                if isinstance(rules, Mapping):
                    for rule_id, settings in rules.items():
                        if not isinstance(rule_id, str):
                            continue
                        rule_id = rule_id.strip()
                        rule = pack.rules.get(rule_id, RuleClassification(rule=rule_id))
                        self._apply_rule_settings(rule, settings, manifest_path)
                        pack.rules[rule_id] = rule

                packs[name] = pack

        return list(packs.values())

    # ------------------------------------------------------------------
    def enabled_packs(self, manifests: Sequence[Path | str] | None = None) -> List[ClassificationPack]:
        """Return only the packs that are enabled after merging manifests."""

        return [pack for pack in self.load(manifests) if pack.enabled]

    # ------------------------------------------------------------------
    def entries(self, manifests: Sequence[Path | str] | None = None) -> List[ClassificationEntry]:
        """Return the classification entries of every enabled pack."""

        entries: List[ClassificationEntry] = []
        for pack in self.enabled_packs(manifests):
            entries.extend(pack.entries())
        return entries

    # ------------------------------------------------------------------
    def _apply_rule_settings(
        self, rule: RuleClassification, settings: Any, manifest_path: Path
    ) -> None:
        if settings is None:
            rule.enabled = False
            return
        if not isinstance(settings, Mapping):
            raise ManifestError(f"Rule '{rule.rule}' must map to settings in {manifest_path}")

        if "enabled" in settings:
            rule.enabled = bool(settings["enabled"])

        debt_type = settings.get("debt_type")
        if debt_type is not None:
            try:
                rule.debt_type = DebtType(str(debt_type).strip().lower())
            except ValueError as exc:
                raise ManifestError(
                    f"Unknown debt type '{debt_type}' for rule '{rule.rule}' in {manifest_path}"
                ) from exc

        mode = settings.get("mode")
        if mode is not None:
            try:
                rule.mode = CostMode(str(mode).strip().lower())
            except ValueError as exc:
                raise ManifestError(
                    f"Unknown cost mode '{mode}' for rule '{rule.rule}' in {manifest_path}"
                ) from exc

        if "cost" in settings:
            try:
                cost = float(settings["cost"])
            except (TypeError, ValueError) as exc:
                raise ManifestError(
                    f"Cost for rule '{rule.rule}' must be numeric in {manifest_path}"
                ) from exc
            if cost < 0:
                raise ManifestError(
                    f"Cost for rule '{rule.rule}' must not be negative in {manifest_path}"
                )
            rule.cost = cost

    # ------------------------------------------------------------------
    def _load_manifest(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ManifestError(f"Classification manifest not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise ManifestError(f"Failed to read classification manifest {path}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ManifestError(f"Invalid YAML in classification manifest {path}") from exc

        if not isinstance(data, Mapping):
            raise ManifestError(f"Classification manifest must be a mapping: {path}")

        logger.debug("Loaded classification manifest %s", path)
        return dict(data)
