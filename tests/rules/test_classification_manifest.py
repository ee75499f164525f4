from pathlib import Path

import pytest

from toxicity_chart.models import CostMode, DebtType
from toxicity_chart.rules import ClassificationManifestManager, ManifestError


def write_manifest(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_merges_default_and_override_manifests(tmp_path: Path):
    default_manifest = write_manifest(
        tmp_path,
        "defaults.yaml",
        """
packs:
  - name: checkstyle
    repository: checkstyle
    rules:
      MethodLengthCheck:
        debt_type: method_length
        mode: threshold
        cost: 1
      MissingSwitchDefaultCheck:
        debt_type: missing_switch_default
""",
    )
    override_manifest = write_manifest(
        tmp_path,
        "override.yaml",
        """
packs:
  - name: checkstyle
    rules:
      MethodLengthCheck:
        cost: 2.5
      MissingSwitchDefaultCheck:
        enabled: false
  - name: pmd
    repository: pmd
    enabled: false
    rules:
      GodClass:
        debt_type: class_fan_out_complexity
""",
    )

    manager = ClassificationManifestManager(default_manifests=[default_manifest])
    packs = {pack.name: pack for pack in manager.load([override_manifest])}

    assert set(packs) == {"checkstyle", "pmd"}
    method_length = packs["checkstyle"].rules["MethodLengthCheck"]
    assert method_length.debt_type is DebtType.METHOD_LENGTH
    assert method_length.mode is CostMode.THRESHOLD
    assert method_length.cost == 2.5
    assert packs["checkstyle"].rules["MissingSwitchDefaultCheck"].enabled is False

    entries = manager.entries([override_manifest])
    assert [entry.rule_key for entry in entries] == ["checkstyle:MethodLengthCheck"]
    assert entries[0].cost == 2.5


def test_null_rule_settings_disable_the_rule(tmp_path: Path):
    manifest = write_manifest(
        tmp_path,
        "manifest.yaml",
        """
packs:
  - name: checkstyle
    repository: checkstyle
    rules:
      FileLengthCheck:
""",
    )

    manager = ClassificationManifestManager(default_manifests=[manifest])

    assert manager.entries() == []


def test_default_manifest_loaded():
    manager = ClassificationManifestManager()
    packs = manager.enabled_packs()

    assert [pack.name for pack in packs] == ["checkstyle"]
    checkstyle = packs[0]
    assert checkstyle.repository == "checkstyle"
    switch_default = checkstyle.rules[
        "com.puppycrawl.tools.checkstyle.checks.coding.MissingSwitchDefaultCheck"
    ]
    assert switch_default.debt_type is DebtType.MISSING_SWITCH_DEFAULT
    assert switch_default.mode is CostMode.FIXED
    assert len(manager.entries()) == len(DebtType)


def test_missing_manifest_raises(tmp_path: Path):
    manager = ClassificationManifestManager()
    with pytest.raises(ManifestError):
        manager.load([tmp_path / "missing.yaml"])


@pytest.mark.parametrize(
    "rule_settings",
    [
        "{debt_type: not_a_category}",
        "{debt_type: file_length, mode: quadratic}",
        "{debt_type: file_length, cost: lots}",
        "{debt_type: file_length, cost: -1}",
        "just-a-string",
    ],
)
def test_invalid_rule_settings_raise(tmp_path: Path, rule_settings: str):
    manifest = write_manifest(
        tmp_path,
        "bad.yaml",
        f"packs:\n  - name: custom\n    rules:\n      SomeCheck: {rule_settings}\n",
    )

    with pytest.raises(ManifestError):
        ClassificationManifestManager(default_manifests=[manifest]).load()


def test_non_mapping_manifest_raises(tmp_path: Path):
    manifest = write_manifest(tmp_path, "list.yaml", "- one\n- two\n")

    with pytest.raises(ManifestError):
        ClassificationManifestManager(default_manifests=[manifest]).load()
