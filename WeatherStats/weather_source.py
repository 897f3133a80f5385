"""Weather source abstraction - allows swapping where observations come from."""
from abc import ABC, abstractmethod
from typing import List

from weather_data import WeatherData


class WeatherSourceBase(ABC):
    """Abstract base class for weather observation sources."""

    @abstractmethod
    def read_lines(self) -> List[str]:
        """
        Read the raw lines of the source, header included, in source order.

        Raises:
            WeatherSourceError: If the source cannot be opened or read
        """
        pass

    @abstractmethod
    def load(self) -> List[WeatherData]:
        """
        Read and parse every observation in the source.

        Raises:
            WeatherSourceError: If the source cannot be opened or read
            ParseError: If any data line is malformed
        """
        pass


class WeatherSourceError(IOError):
    """Exception raised when a weather source cannot be read."""
    pass
