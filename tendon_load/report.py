"""
Report generators for session results.

Formats results for console and JSON output.
"""

import json

from tendon_load.features.session.service import SessionReport
from tendon_load.shared.calculator_types import BoulderingMode
from tendon_load.shared.formatters import (
    format_percent,
    format_ratio,
    format_rest_days,
    format_tli,
)


class ReportGenerator:
    """Generate reports in various formats."""

    def generate_console(self, report: SessionReport) -> str:
        """Generate ASCII report for console output."""
        b = report.bouldering
        s = report.session

        mode_name = "grade fractions" if b.mode == BoulderingMode.GRADE_FRACTION else "per climb"

        lines = [
            "",
            "=" * 60,
            "                 TENDON LOAD REPORT",
            "=" * 60,
            "",
            f"Bouldering ({mode_name})",
            "-" * 60,
            f"Time under tension:  {b.total_tut:.0f} s",
            f"Rest within session: {b.total_rest_within:.0f} s",
            f"Freshness factor:    {b.freshness_factor:.3f}",
            f"Density factor:      {b.density_factor:.3f}",
        ]

        if b.contributions:
            lines.extend([
                "",
                "  #  | Grade |   RI   | Weight |  TUT  | Load",
                "-----|-------|--------|--------|-------|-------",
            ])
            for c in b.contributions:
                lines.append(
                    f"{c.position:>4} | V{c.grade:<4g} | {c.relative_intensity:>6.3f} | "
                    f"{c.weight:>6.3f} | {c.tut_sec:>5.0f} | {c.contribution:>6.1f}"
                )

        lines.extend([
            "",
            f"Bouldering TLI:      {format_tli(b.total)}",
            "",
            "Hangboard",
            "-" * 60,
        ])

        if report.hangboard.rows:
            for i, row in enumerate(report.hangboard.rows, start=1):
                lines.append(
                    f"Row {i}: RI {format_percent(row.relative_intensity)} of "
                    f"{row.mvc_edge_kg:.1f} kg, TUT {row.work_seconds:.0f} s, "
                    f"DF {row.density_factor:.3f} -> {format_tli(row.per_set)} per set "
                    f"x {row.sets} = {format_tli(row.total)}"
                )
        else:
            lines.append("No hangboard work")

        lines.extend([
            "",
            f"Hangboard TLI:       {format_tli(report.hangboard.total)}",
            "",
            "=" * 60,
            f"TOTAL TLI:           {format_tli(s.total)}",
        ])

        if report.historical_average > 0:
            lines.append(
                f"4-week average:      {format_tli(report.historical_average)} "
                f"({format_ratio(s.ratio_to_average)})"
            )
        if report.status:
            marker = "!!" if s.spike_warning else "ok"
            lines.append(f"Status:              [{marker}] {report.status}")

        rest = s.recommended_rest_days
        lines.extend([
            f"Recommended rest:    {format_rest_days(rest.min, rest.max)}",
            "=" * 60,
            "",
            report.advisory,
            "",
        ])

        return "\n".join(lines)

    def generate_json(self, report: SessionReport) -> str:
        """Generate JSON report."""
        return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
