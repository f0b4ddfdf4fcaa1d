import datetime

import pytest

from latency_check.formatting import build_report, format_duration, render_report
from latency_check.models import PhaseBreakdown


@pytest.mark.parametrize("ms, expected", [
    (0, "0ms"),
    (0.3, "1ms"),
    (50, "50ms"),
    (123.4, "123ms"),
    (123.5, "124ms"),
    (999, "999ms"),
    (1000, "1s"),
    (1234, "1.2s"),
    (1299.9, "1.2s"),
    (60000, "1m"),
    (65000, "1m 5s"),
    (3723000, "1h 2m 3s"),
    (90061000, "1d 1h 1m 1s"),
])
def test_format_duration(ms, expected):
    assert format_duration(ms) == expected


@pytest.mark.parametrize("ms, expected", [
    (0, "0ms"),
    (50, "50.00ms"),
    (123.456, "123.46ms"),
    (0.125, "0.13ms"),
    (0.625, "0.63ms"),
    (1234, "1.2s"),
])
def test_format_duration_decimal(ms, expected):
    assert format_duration(ms, decimal=True) == expected


def make_breakdown():
    return PhaseBreakdown(dns=50.0, connect=150.0, ssl=250.0, processing=500.0,
                          transfer=50.0, total=1000.0, response_size_bytes=42)


def test_build_report_formats_every_field():
    now = datetime.datetime(2024, 3, 9, 14, 5, 7, 999000)
    report = build_report(make_breakdown(), now=now)

    assert report.date == "2024-03-09 14:05:07"
    assert (report.dns, report.connect, report.ssl) == ("50ms", "150ms", "250ms")
    assert (report.processing, report.transfer, report.total) == ("500ms", "50ms", "1s")
    assert report.response_size_bytes == 42


def test_render_report_line_order():
    now = datetime.datetime(2024, 3, 9, 14, 5, 7)
    text = render_report(build_report(make_breakdown(), decimal=True, now=now))

    assert text.split("\n") == [
        "Date: 2024-03-09 14:05:07",
        "DNS Lookup: 50.00ms",
        "TCP Connection: 150.00ms",
        "SSL: 250.00ms",
        "Server Processing: 500.00ms",
        "Content Transfer: 50.00ms",
        "Total: 1s",
        "Response Size: 42 bytes",
    ]


def test_default_date_is_current_utc():
    before = datetime.datetime.now(datetime.UTC).replace(microsecond=0, tzinfo=None)
    report = build_report(make_breakdown())
    stamped = datetime.datetime.strptime(report.date, "%Y-%m-%d %H:%M:%S")
    assert stamped >= before
