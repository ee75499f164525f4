"""Adapter layer for the analysis host and findings report ingestion."""

from .host import (
    DecoratorContext,
    InMemoryIssueSource,
    IssueSource,
    MeasureStore,
    RecordingDecoratorContext,
)
from .report_loader import ReportLoader, ReportLoaderError

__all__ = [
    "DecoratorContext",
    "InMemoryIssueSource",
    "IssueSource",
    "MeasureStore",
    "RecordingDecoratorContext",
    "ReportLoader",
    "ReportLoaderError",
]
