"""
Formatter
Renders durations the way people read them ("123ms", "1.2s", "1m 5s") and
lays the report out in its fixed line order.
"""

import datetime
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from .models import PhaseBreakdown, TimingReport

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _floor_decimals(value: float, digits: int) -> str:
    factor = 10 ** digits
    return f"{math.floor(round(value * factor, 6)) / factor:.{digits}f}"


def format_duration(milliseconds: float, decimal: bool = False) -> str:
    """
    Format a millisecond count for display.

    Under a second the value stays in milliseconds, with two decimals when
    `decimal` is set. From one second up it is split into days, hours,
    minutes and seconds, with seconds floored to one decimal.
    """
    if milliseconds < 1000:
        if decimal:
            text = str(Decimal(milliseconds).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
        elif milliseconds >= 1:
            text = str(math.floor(milliseconds + 0.5))
        else:
            text = str(math.ceil(milliseconds))
        if float(text) == 0:
            return "0ms"
        return f"{text}ms"

    whole = int(milliseconds // 1000)
    days, rest = divmod(whole, 86400)
    hours, rest = divmod(rest, 3600)
    minutes = rest // 60
    seconds = (milliseconds / 1000) % 60

    parts: List[str] = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    seconds_text = _floor_decimals(seconds, 1)
    if seconds_text.endswith(".0"):
        seconds_text = seconds_text[:-2]
    if float(seconds_text) != 0:
        parts.append(f"{seconds_text}s")
    return " ".join(parts) or "0ms"


def build_report(breakdown: PhaseBreakdown, decimal: bool = False,
                 now: Optional[datetime.datetime] = None) -> TimingReport:
    """Render every duration of `breakdown`; the date defaults to the current UTC time."""
    now = now or datetime.datetime.now(datetime.UTC)
    return TimingReport(
        date=now.strftime(DATE_FORMAT),
        dns=format_duration(breakdown.dns, decimal),
        connect=format_duration(breakdown.connect, decimal),
        ssl=format_duration(breakdown.ssl, decimal),
        processing=format_duration(breakdown.processing, decimal),
        transfer=format_duration(breakdown.transfer, decimal),
        total=format_duration(breakdown.total, decimal),
        response_size_bytes=breakdown.response_size_bytes,
    )


def render_report(report: TimingReport) -> str:
    lines = [
        f"Date: {report.date}",
        f"DNS Lookup: {report.dns}",
        f"TCP Connection: {report.connect}",
        f"SSL: {report.ssl}",
        f"Server Processing: {report.processing}",
        f"Content Transfer: {report.transfer}",
        f"Total: {report.total}",
        f"Response Size: {report.response_size_bytes} bytes",
    ]
    return "\n".join(lines)
