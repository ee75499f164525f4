"""Conversion helpers that turn a raw findings report into service models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from ..models import Finding, Resource, ResourceQualifier


@dataclass(slots=True)
class NormalizedReport:
    """Project, resource tree and findings extracted from a report."""

    project: Resource
    resources: List[Resource] = field(default_factory=list)
    issues_by_component: Dict[str, List[Finding]] = field(default_factory=dict)

    @property
    def finding_count(self) -> int:
        return sum(len(findings) for findings in self.issues_by_component.values())


class ReportNormalizer:
    """Normalize findings report mappings into :class:`NormalizedReport` instances."""

    def normalize(self, report: Mapping[str, Any]) -> NormalizedReport:
        """Return the normalized project tree and findings for ``report``."""

        project_data = report.get("project") or {}
        if not isinstance(project_data, Mapping):
            project_data = {"key": project_data}
        project = self._normalize_project(project_data)

        raw_resources: Iterable[Mapping[str, Any]] = report.get("resources", []) or []
        resources = [
            self._normalize_resource(entry, project)
            for entry in raw_resources
            if isinstance(entry, Mapping) and entry.get("key")
        ]
        resources = [resource for resource in resources if resource.key != project.key]

        # Findings on components outside the resource list are charged to the project.
        known_components = {resource.identity for resource in resources}
        issues: Dict[str, List[Finding]] = {}
        for entry in report.get("issues", []) or []:
            if not isinstance(entry, Mapping):
                continue
            finding = self._normalize_issue(entry, project)
            if finding is None:
                continue
            owner = finding.component_key if finding.component_key in known_components else project.identity
            issues.setdefault(owner, []).append(finding)

        return NormalizedReport(project=project, resources=resources, issues_by_component=issues)

    # ------------------------------------------------------------------
    def _normalize_project(self, data: Mapping[str, Any]) -> Resource:
        key = data.get("key")
        key = str(key).strip() if key is not None else None
        return Resource.project(key or None, str(data.get("name") or ""), is_root=True)

    def _normalize_resource(self, data: Mapping[str, Any], project: Resource) -> Resource:
        key = str(data["key"]).strip()
        name = str(data.get("name") or key.rsplit("/", 1)[-1])
        parent = data.get("parent")
        return Resource(
            key=key,
            name=name,
            long_name=str(data.get("long_name") or key),
            qualifier=self._normalize_qualifier(data.get("qualifier")),
            parent_key=str(parent).strip() if parent else project.key,
            is_root=False,
        )

    def _normalize_issue(self, data: Mapping[str, Any], project: Resource) -> Finding | None:
        rule_key = str(data.get("rule") or data.get("rule_key") or "").strip()
        if not rule_key:
            return None

        component = str(data.get("component") or project.key or "").strip()
        line = data.get("line")
        severity = data.get("severity")
        return Finding(
            rule_key=rule_key,
            component_key=component,
            message=str(data.get("message") or "").strip(),
            line=int(line) if isinstance(line, (int, str)) and str(line).isdigit() else None,
            severity=str(severity).upper() if severity else None,
        )

    def _normalize_qualifier(self, qualifier: object) -> ResourceQualifier:
        if isinstance(qualifier, ResourceQualifier):
            return qualifier
        if isinstance(qualifier, str):
            normalized = qualifier.strip().upper()
            for candidate in ResourceQualifier:
                if normalized in (candidate.value, candidate.name):
                    return candidate
        return ResourceQualifier.FILE
