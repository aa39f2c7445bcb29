# MIT License (see LICENSE)
"""
Report adapters for printing field samples.

This module provides an abstract base class for reporting and two
concrete implementations: a console reporter that writes text to a
stream and a buffered reporter that keeps the lines in memory. The
field models have no printing dependency; these adapters are the only
place output is produced.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TextIO
import sys

from ..types import FieldModel, ElectricField, MagneticField, describe_field


class ReportAdapter(ABC):
    """
    Abstract base class for report implementations.

    Subclasses implement write_line() and end(); the convenience methods
    turn headings and fields into lines.

    Usage:
        reporter = ConsoleReporter()
        reporter.heading("Initial Electric and Magnetic Field Components:")
        reporter.describe(e1)
        reporter.end()
    """

    @abstractmethod
    def write_line(self, text: str) -> None:
        """
        Emit a single line of text.

        Args:
            text: Line content without a trailing newline.
        """
        ...

    @abstractmethod
    def end(self) -> None:
        """Finish the report."""
        ...

    def blank(self) -> None:
        """Emit an empty separator line."""
        self.write_line("")

    def heading(self, text: str) -> None:
        """Emit a section heading."""
        self.write_line(text)

    def describe(self, field: FieldModel) -> None:
        """Emit the full description of a field, magnitude line included."""
        for line in describe_field(field).splitlines():
            self.write_line(line)

    def show(self, field: ElectricField | MagneticField) -> None:
        """Emit the components-only text form of a field."""
        self.write_line(field.format_components())


class ConsoleReporter(ReportAdapter):
    """
    Text reporter writing to a stream (stdout by default).

    Example:
        reporter = ConsoleReporter()
        reporter.show(ElectricField(1e4, 1.2e5, 3.1e4))

    Output:
        Electric Field components: (10000, 120000, 31000)
    """

    def __init__(self, output: TextIO | None = None):
        """
        Initialize the console reporter.

        Args:
            output: Output stream (defaults to sys.stdout).
        """
        self.output = output or sys.stdout

    def write_line(self, text: str) -> None:
        self.output.write(text + "\n")

    def end(self) -> None:
        self.output.flush()


class BufferedReporter(ReportAdapter):
    """
    Reporter that buffers lines for later retrieval.

    Example:
        reporter = BufferedReporter()
        run_demo(reporter=reporter)
        print(reporter.text)
    """

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def end(self) -> None:
        pass

    @property
    def text(self) -> str:
        """All buffered lines joined as they would appear on a console."""
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        """Clear all buffered lines."""
        self.lines.clear()
