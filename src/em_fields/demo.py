# MIT License (see LICENSE)
"""
Console demonstration of the field models.

Runs one fixed pass:
    1. Build an electric and a magnetic field and print them.
    2. Evaluate Gauss's Law and Ampere's Law and print again.
    3. Add a second field of each kind and print the sums.

Run:
    python -m em_fields
"""
from __future__ import annotations
from dataclasses import dataclass

from .config import DemoConfig
from .log import get_logger, setup_logging
from .report import ConsoleReporter, ReportAdapter
from .types import ElectricField, MagneticField

logger = get_logger(__name__)


@dataclass
class DemoResult:
    """Fields produced by a demo run, in their final state."""
    electric: ElectricField
    magnetic: MagneticField
    electric_sum: ElectricField
    magnetic_sum: MagneticField


def run_demo(config: DemoConfig | None = None, reporter: ReportAdapter | None = None) -> DemoResult:
    """
    Run the demonstration sequence and report each stage.

    Args:
        config: Demo inputs (defaults to DemoConfig()).
        reporter: Output adapter (defaults to a ConsoleReporter on stdout).

    Returns:
        The calculated fields and the two sums.
    """
    config = config or DemoConfig()
    reporter = reporter or ConsoleReporter()

    e1 = ElectricField(*config.electric)
    m1 = MagneticField(*config.magnetic)

    reporter.heading("Initial Electric and Magnetic Field Components:")
    reporter.describe(e1)
    reporter.describe(m1)

    e1.compute_field(config.charge, config.distance)
    reporter.blank()
    reporter.heading("After calculating Electric Field:")
    reporter.describe(e1)

    m1.compute_field(config.current, config.distance)
    reporter.blank()
    reporter.heading("After calculating Magnetic Field:")
    reporter.describe(m1)

    e3 = e1.add(ElectricField(*config.electric_addend))
    reporter.blank()
    reporter.heading("After adding two Electric Fields:")
    reporter.show(e3)

    m3 = m1.add(MagneticField(*config.magnetic_addend))
    reporter.blank()
    reporter.heading("After adding two Magnetic Fields:")
    reporter.show(m3)

    reporter.end()
    logger.debug("demo finished: E=%g N/C, B=%g T", e1.calculated_magnitude, m1.calculated_magnitude)
    return DemoResult(electric=e1, magnetic=m1, electric_sum=e3, magnetic_sum=m3)


def main() -> int:
    """Console entry point. Prints the demo to stdout and returns 0."""
    setup_logging()
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
