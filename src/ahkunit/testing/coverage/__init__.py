"""Line coverage parsing, merging, and reporting.

Usage:
    from ahkunit.testing.coverage import parse_executed_lines, merge_coverage, build_report

    # Parse one test's coverage section
    coverage = parse_executed_lines(section_text)

    # Union across tests
    merged = merge_coverage(coverage1, coverage2)

    # Per-file statement coverage
    report = build_report(merged)
"""

from ahkunit.testing.coverage.merge import (
    CoverageAggregator,
    merge_coverage,
    merge_coverage_maps,
)
from ahkunit.testing.coverage.models import (
    CoverageReport,
    CoverageSummary,
    FileCoverage,
)
from ahkunit.testing.coverage.parser import parse_executed_lines
from ahkunit.testing.coverage.report import (
    build_report,
    build_summary,
    build_text_summary,
    count_executable_lines,
    is_temp_path,
)

__all__ = [
    # Models
    "CoverageReport",
    "CoverageSummary",
    "FileCoverage",
    # Parsing
    "parse_executed_lines",
    # Merge
    "CoverageAggregator",
    "merge_coverage",
    "merge_coverage_maps",
    # Report
    "build_report",
    "build_summary",
    "build_text_summary",
    "count_executable_lines",
    "is_temp_path",
]
