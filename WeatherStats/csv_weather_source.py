"""Delimited text file implementation of the weather source."""
import logging
import os
from typing import List

from observation_parser import parse_lines
from weather_data import WeatherData
from weather_source import WeatherSourceBase, WeatherSourceError


class CsvWeatherSource(WeatherSourceBase):
    """
    Weather source backed by a comma-separated file.

    Expected layout (header line is always skipped, whatever it says):

        date,temperature,humidity,precipitation,windSpeed
        2023-01-01,5.5,80.0,2.1,12.3
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        """
        Initialize CSV source.

        Args:
            path: Path to the data file
            encoding: Text encoding of the file
        """
        self.path = path
        self.encoding = encoding

    def read_lines(self) -> List[str]:
        try:
            logging.info(f"Reading weather data from {self.path}")
            with open(self.path, encoding=self.encoding) as f:
                lines = f.read().splitlines()
            logging.debug(f"Read {len(lines)} lines from {os.path.basename(self.path)}")
            return lines
        except (OSError, UnicodeDecodeError) as e:
            logging.debug(f"Cannot read weather data from {self.path}: {e}")
            raise WeatherSourceError(f"Cannot read {self.path}: {e}") from e

    def load(self) -> List[WeatherData]:
        return parse_lines(self.read_lines())
