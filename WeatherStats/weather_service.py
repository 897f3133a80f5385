"""Weather analysis service - loads a source once and renders the reports."""
import logging
from typing import List, Optional, TextIO

from report import DEFAULT_THRESHOLD, generate_monthly_report, print_analysis
from weather_data import WeatherData
from weather_source import WeatherSourceBase


class WeatherAnalysisService:
    """
    Service that wraps a weather source with the analysis pipeline.

    Observations are parsed in full before any report output begins, so a
    malformed file produces no report at all.
    """

    def __init__(self, source: WeatherSourceBase, threshold: float = DEFAULT_THRESHOLD):
        """
        Initialize analysis service.

        Args:
            source: Where observations are read from
            threshold: Temperature (°C) for the hot-days listing
        """
        self.source = source
        self.threshold = threshold

        self._observations: Optional[List[WeatherData]] = None

    def get_observations(self) -> List[WeatherData]:
        """
        Parsed observations, loaded from the source on first use.

        Raises:
            WeatherSourceError: If the source cannot be read
            ParseError: If any data line is malformed
        """
        if self._observations is None:
            self._observations = self.source.load()
            logging.info(f"Loaded {len(self._observations)} observations")
        else:
            logging.debug("Using already loaded observations")
        return self._observations

    def analyze(self, out: Optional[TextIO] = None) -> str:
        """
        Print the analysis sections and return the monthly report text.

        Args:
            out: Stream for the analysis sections (stdout by default)

        Returns:
            str: The monthly weather report, for the caller to print
        """
        observations = self.get_observations()
        logging.info(f"Analyzing {len(observations)} observations (threshold {self.threshold}°C)")
        print_analysis(observations, self.threshold, out)
        return generate_monthly_report(observations)
