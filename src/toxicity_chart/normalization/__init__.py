"""Normalization of host findings reports."""

from .report_normalizer import NormalizedReport, ReportNormalizer

__all__ = ["NormalizedReport", "ReportNormalizer"]
