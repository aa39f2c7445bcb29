# MIT License (see LICENSE)
"""
Report adapters for field output.

This subpackage provides abstract and concrete reporter implementations:
    - ReportAdapter: Abstract base class defining the reporting interface.
    - ConsoleReporter: Text output to a stream.
    - BufferedReporter: Records lines for inspection.

Typical usage:
    from em_fields.report import ConsoleReporter

    reporter = ConsoleReporter()
    reporter.describe(field)
"""
from .adapter import (
    ReportAdapter,
    ConsoleReporter,
    BufferedReporter,
)

__all__ = [
    "ReportAdapter",
    "ConsoleReporter",
    "BufferedReporter",
]
