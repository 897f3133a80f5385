"""Pure reducers over sequences of observations.

Every aggregator takes a sequence of WeatherData and returns a plain value.
Filtering is kept separate and composed with ``with_filter``.
"""
from collections import Counter
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from weather_data import WeatherCategory, WeatherData

T = TypeVar("T")

Aggregator = Callable[[Sequence[WeatherData]], T]
Predicate = Callable[[WeatherData], bool]


def average_temperature(data: Sequence[WeatherData]) -> float:
    """Mean temperature, or 0.0 for an empty sequence."""
    if not data:
        return 0.0
    return sum(d.temperature for d in data) / len(data)


def rainy_day_count(data: Sequence[WeatherData]) -> int:
    return sum(1 for d in data if d.is_rainy_day())


def category_histogram(data: Sequence[WeatherData]) -> Dict[WeatherCategory, int]:
    """Count of days per category; only categories that occur are present."""
    return dict(Counter(d.category for d in data))


def group_by_month(data: Sequence[WeatherData]) -> Dict[int, List[WeatherData]]:
    """
    Partition observations by month of year (1-12), ignoring the year.

    Order within each month follows the input order. Keys are in calendar order.
    """
    groups: Dict[int, List[WeatherData]] = {}
    for d in data:
        groups.setdefault(d.date.month, []).append(d)
    return {month: groups[month] for month in sorted(groups)}


def above_threshold(data: Sequence[WeatherData], threshold: float) -> List[WeatherData]:
    """Observations strictly warmer than ``threshold``, in input order."""
    return [d for d in data if d.temperature > threshold]


def dominant_category(data: Sequence[WeatherData]) -> Optional[WeatherCategory]:
    """
    Most frequent category, or None for an empty sequence.

    Ties go to the category that appears first in ``data``.
    """
    if not data:
        return None
    # Counter keeps first-seen order and max() returns the first maximal item.
    counts = Counter(d.category for d in data)
    return max(counts, key=counts.__getitem__)


def with_filter(aggregator: Aggregator, predicate: Predicate) -> Aggregator:
    """
    Restrict an aggregator to the observations matching ``predicate``.

    Example:
        warm_average = with_filter(average_temperature, lambda d: d.temperature > 10)
        warm_average(observations)
    """
    def filtered(data: Sequence[WeatherData]):
        return aggregator([d for d in data if predicate(d)])

    return filtered
