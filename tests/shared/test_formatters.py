"""
Tests for display formatters and the console report.
"""

import math

from tendon_load.features.session import SessionRequest, SessionService
from tendon_load.features.hangboard import HangboardRowInput
from tendon_load.report import ReportGenerator
from tendon_load.shared.formatters import (
    format_percent,
    format_ratio,
    format_rest_days,
    format_tli,
)


class TestFormatters:

    def test_format_tli(self):
        assert format_tli(37.118) == "37.1"
        assert format_tli(1234.56) == "1,234.6"
        assert format_tli(math.nan) == "—"

    def test_format_ratio(self):
        assert format_ratio(1.25) == "1.25×"
        assert format_ratio(math.inf) == "—"

    def test_format_rest_days(self):
        assert format_rest_days(1, 1) == "1 day"
        assert format_rest_days(0, 0) == "0 days"
        assert format_rest_days(1, 2) == "1–2 days"

    def test_format_percent(self):
        assert format_percent(0.781) == "78.1%"


class TestConsoleReport:

    def test_hangboard_only(self):
        report = SessionService.evaluate(
            SessionRequest(hangboard=[HangboardRowInput(sets=2)], historical_average=0)
        )
        text = ReportGenerator().generate_console(report)

        assert "Row 1:" in text
        assert "x 2 =" in text
        assert "4-week average" not in text
        assert "Status:" not in text

    def test_no_hangboard(self):
        report = SessionService.evaluate(SessionRequest(historical_average=1200))
        text = ReportGenerator().generate_console(report)

        assert "No hangboard work" in text
        assert "0–1 days" in text
