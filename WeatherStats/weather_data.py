"""Weather domain model - one immutable observation per day."""
from dataclasses import dataclass
import datetime
from enum import Enum


class WeatherCategory(Enum):
    """Temperature bands a day can fall into."""
    HOT = "Hot"
    WARM = "Warm"
    MILD = "Mild"
    COOL = "Cool"
    COLD = "Cold"

    def __str__(self) -> str:
        return self.value


def weather_category(temperature: float) -> WeatherCategory:
    """
    Classify a temperature (°C) into a WeatherCategory.

    Bands are whole decades: [30, 60) Hot, [20, 30) Warm, [10, 20) Mild,
    [0, 10) Cool. Everything else, below zero, 60 and above, or NaN, is Cold.
    """
    if 30 <= temperature < 60:
        return WeatherCategory.HOT
    if 20 <= temperature < 30:
        return WeatherCategory.WARM
    if temperature >= 10:
        return WeatherCategory.MILD
    if temperature >= 0:
        return WeatherCategory.COOL
    return WeatherCategory.COLD


@dataclass(frozen=True)
class WeatherData:
    """A single day's observation as read from the data file."""
    date: datetime.date
    temperature: float  # °C
    humidity: float  # percent, not range-checked
    precipitation: float  # mm
    wind_speed: float = 0.0  # km/h

    @classmethod
    def from_csv(cls, line: str) -> "WeatherData":
        """Build an observation from one data line (header excluded)."""
        # observation_parser imports this module at load time
        from observation_parser import parse_line
        return parse_line(line)

    @property
    def category(self) -> WeatherCategory:
        return weather_category(self.temperature)

    def is_rainy_day(self) -> bool:
        """Any positive precipitation, however small, counts as rain."""
        return self.precipitation > 0
