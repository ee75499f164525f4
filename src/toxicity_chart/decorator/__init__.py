"""Host-facing decorator and its visitation bookkeeping."""

from .toxicity_chart_decorator import MEASURE_COUNT, ToxicityChartDecorator
from .visitation import ResourceVisitationTracker, TrackerState

__all__ = [
    "MEASURE_COUNT",
    "ResourceVisitationTracker",
    "ToxicityChartDecorator",
    "TrackerState",
]
