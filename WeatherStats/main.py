"""Weather data analyzer - reads a CSV of daily observations and prints reports."""
import argparse
import logging
import os
import signal
import sys
import threading
from typing import List, Optional, TextIO, Tuple

from dotenv import load_dotenv

from csv_weather_source import CsvWeatherSource
from observation_parser import ParseError
from report import DEFAULT_THRESHOLD
from sample_data import create_sample_data
from weather_service import WeatherAnalysisService
from weather_source import WeatherSourceError

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_DATA_FILE = os.path.join(BASE_DIR, "weatherdata.csv")

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Weather data analyzer")
    parser.add_argument("--data-file", default=None, help="CSV file to analyze (env: WEATHER_DATA_FILE)")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Hot-day threshold in °C (env: WEATHER_THRESHOLD)")
    parser.add_argument("--create-sample", action="store_true",
                        help="Write the sample dataset to the data file before analyzing")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    # stdout is reserved for the report itself
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config(args: argparse.Namespace) -> Tuple[str, float]:
    load_dotenv()
    data_file = args.data_file or os.getenv("WEATHER_DATA_FILE", DEFAULT_DATA_FILE)

    if args.threshold is not None:
        threshold = args.threshold
    else:
        raw = os.getenv("WEATHER_THRESHOLD")
        try:
            threshold = float(raw) if raw else DEFAULT_THRESHOLD
        except ValueError as exc:
            raise SystemExit(f"Invalid WEATHER_THRESHOLD: {exc}") from exc

    logging.info("Configuration loaded: data_file=%s threshold=%s", data_file, threshold)
    return data_file, threshold


def run_analysis(service: WeatherAnalysisService, out: Optional[TextIO] = None) -> None:
    """Run the full pipeline; an unreadable or malformed source is logged, not raised."""
    out = out or sys.stdout
    try:
        monthly_report = service.analyze(out)
        out.write("\n" + monthly_report)
        out.flush()
    except (WeatherSourceError, ParseError) as err:
        logging.error("Error analyzing weather data: %s", err)


def run_in_worker(target) -> None:
    """Run ``target`` on a single worker thread and wait for it to finish."""
    worker = threading.Thread(target=target, name="weather-analysis", daemon=True)
    worker.start()
    logging.debug("Started worker thread %s", worker.name)
    worker.join()


def signal_handler(signum, frame):
    logging.info("Received signal %s, shutting down", signum)
    raise KeyboardInterrupt()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    data_file, threshold = load_config(args)

    if args.create_sample:
        try:
            create_sample_data(data_file)
        except OSError as exc:
            raise SystemExit(f"Cannot write sample data to {data_file}: {exc}") from exc

    service = WeatherAnalysisService(CsvWeatherSource(data_file), threshold=threshold)

    signal.signal(signal.SIGTERM, signal_handler)

    try:
        run_in_worker(lambda: run_analysis(service))
    except KeyboardInterrupt:
        logging.warning("Analysis interrupted")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
