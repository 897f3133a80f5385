"""Text report rendering - pure formatting functions plus a thin print wrapper."""
import calendar
import sys
from typing import List, Optional, Sequence, TextIO

from aggregators import (
    above_threshold,
    average_temperature,
    category_histogram,
    dominant_category,
    group_by_month,
    rainy_day_count,
)
from weather_data import WeatherData

DEFAULT_THRESHOLD = 25.0


def month_name(month: int) -> str:
    """Display name for a month number, e.g. 1 -> "January"."""
    return calendar.month_name[month]


def format_summary(data: Sequence[WeatherData]) -> List[str]:
    """Header block: record count and date range."""
    dates = [d.date for d in data]
    first = min(dates).isoformat() if dates else "N/A"
    last = max(dates).isoformat() if dates else "N/A"
    return [
        "Weather Data Analysis Summary",
        "----------------------------",
        f"Total records: {len(data)}",
        f"Date range: {first} to {last}",
        "",
        "Detailed Analysis:",
    ]


def format_analysis(data: Sequence[WeatherData], threshold: float = DEFAULT_THRESHOLD) -> str:
    """
    Render the summary and detailed analysis sections.

    Args:
        data: Observations in source order
        threshold: Temperature (°C) above which days are listed individually

    Returns:
        Multi-line report text ending with a newline
    """
    lines = format_summary(data)
    lines.append("")
    lines.append(f"Average Temperature: {average_temperature(data):.2f}°C")
    lines.append(f"Rainy Days: {rainy_day_count(data)}")

    lines.append("")
    lines.append("Temperature Categories:")
    for category, count in category_histogram(data).items():
        lines.append(f" - {category}: {count} day(s)")

    lines.append("")
    lines.append("Monthly Average Temperatures:")
    for month, month_data in group_by_month(data).items():
        lines.append(f" - {month_name(month)}: {average_temperature(month_data):.1f}°C")

    hot_days = above_threshold(data, threshold)
    lines.append("")
    lines.append(f"Days with temperature above {threshold}°C: {len(hot_days)}")
    for d in hot_days:
        lines.append(f" - {d.date.isoformat()}: {d.temperature}°C")

    return "\n".join(lines) + "\n"


def generate_monthly_report(data: Sequence[WeatherData]) -> str:
    """
    Build the per-month narrative: average, rainy days and dominant category.

    Months are listed in calendar order regardless of year.
    """
    parts = ["Monthly Weather Report", "---------------------"]
    for month, month_data in group_by_month(data).items():
        dominant = dominant_category(month_data)
        parts.append("")
        parts.append(f"{month_name(month)}:")
        parts.append(f"  Average Temperature: {average_temperature(month_data):.1f}°C")
        parts.append(f"  Rainy Days: {rainy_day_count(month_data)}")
        parts.append(f"  Dominant Weather: {dominant if dominant is not None else 'Unknown'}")
    return "\n".join(parts) + "\n"


def print_analysis(
    data: Sequence[WeatherData],
    threshold: float = DEFAULT_THRESHOLD,
    out: Optional[TextIO] = None,
) -> None:
    """Write the analysis sections to ``out`` (stdout by default)."""
    out = out or sys.stdout
    out.write(format_analysis(data, threshold))
    out.flush()
