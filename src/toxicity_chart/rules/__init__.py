"""Classification manifest management utilities."""

from .classification_manifest import (
    ClassificationManifestManager,
    ClassificationPack,
    ManifestError,
    RuleClassification,
)

__all__ = [
    "ClassificationManifestManager",
    "ClassificationPack",
    "ManifestError",
    "RuleClassification",
]
