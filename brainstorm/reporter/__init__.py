"""Delivery surfaces for BrainstormBuddy.

Exposes the plain-text summary export and the Rich terminal view of an
analysis.
"""

from brainstorm.reporter.results import print_analysis
from brainstorm.reporter.summary import SummaryExporter, render_summary

__all__ = [
    "SummaryExporter",
    "print_analysis",
    "render_summary",
]
