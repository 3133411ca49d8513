"""
Pattern analysis module.

Provides layout inspection and validation of SPLICE files.
"""

from splicekit.analysis.splice_analyzer import (
    Region,
    SpliceAnalysis,
    SpliceAnalyzer,
    TrackInfo,
    ValidationIssue,
)

__all__ = [
    "Region",
    "SpliceAnalysis",
    "SpliceAnalyzer",
    "TrackInfo",
    "ValidationIssue",
]
