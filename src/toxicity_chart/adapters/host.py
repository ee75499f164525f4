"""Capability interfaces for the analysis host plus in-memory implementations."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Sequence

from ..models import Finding, Measure, Resource


class IssueSource(ABC):
    """Host service that exposes the findings attached to a resource."""

    @abstractmethod
    def fetch_issues(self, resource: Resource) -> Sequence[Finding]:
        """Return every finding attached to ``resource`` (possibly none)."""


class DecoratorContext(ABC):
    """Host measure store scoped to the resource being decorated."""

    @abstractmethod
    def save_measure(self, measure: Measure) -> None:
        """Persist ``measure`` against the current resource."""


class InMemoryIssueSource(IssueSource):
    """Serve findings from a mapping keyed by component key."""

    def __init__(self, issues_by_component: Mapping[str, Sequence[Finding]] | None = None) -> None:
        self._issues: Dict[str, List[Finding]] = {
            key: list(findings) for key, findings in (issues_by_component or {}).items()
        }

    def fetch_issues(self, resource: Resource) -> Sequence[Finding]:
        return list(self._issues.get(resource.identity, []))


class RecordingDecoratorContext(DecoratorContext):
    """Context that keeps the saved measures in memory."""

    def __init__(self, resource: Resource) -> None:
        self.resource = resource
        self.measures: List[Measure] = []

    def save_measure(self, measure: Measure) -> None:
        self.measures.append(measure)

    def value_of(self, metric_key: str) -> Optional[float]:
        """Return the last value saved for ``metric_key``."""

        for measure in reversed(self.measures):
            if measure.metric_key == metric_key:
                return measure.value
        return None


class MeasureStore:
    """Hands out one recording context per resource and keeps them by identity."""

    def __init__(self) -> None:
        self._contexts: Dict[str, RecordingDecoratorContext] = {}
        self._lock = threading.Lock()

    def context_for(self, resource: Resource) -> RecordingDecoratorContext:
        with self._lock:
            context = self._contexts.get(resource.identity)
            if context is None:
                context = RecordingDecoratorContext(resource)
                self._contexts[resource.identity] = context
            return context

    def measures(self) -> Dict[str, Dict[str, float]]:
        """Return saved values as ``{resource: {metric: value}}``."""

        with self._lock:
            contexts = list(self._contexts.items())
        return {
            identity: {measure.metric_key: measure.value for measure in context.measures}
            for identity, context in contexts
            if context.measures
        }
